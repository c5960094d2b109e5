"""FastAPI adapter – liveness / readiness router."""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from staff_admin.observability.logging import get_logger

ReadinessCheck = Callable[[], Awaitable[bool]]

_logger = get_logger(__name__)


def FastAPIHealthRouter(
    path: str = "/health",
    readiness_checks: dict[str, ReadinessCheck] | None = None,
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live``; readiness at ``{path}/ready`` returns 503
    unless every named check returns ``True``.
    """
    router = APIRouter(tags=tags or ["ops"])
    checks = dict(readiness_checks or {})

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        results: dict[str, bool] = {}
        for name, check in checks.items():
            try:
                results[name] = bool(await check())
            except Exception as exc:  # noqa: BLE001
                _logger.warning("health.check_failed", check=name, error=repr(exc))
                results[name] = False

        all_ok = all(results.values())
        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["FastAPIHealthRouter", "ReadinessCheck"]
