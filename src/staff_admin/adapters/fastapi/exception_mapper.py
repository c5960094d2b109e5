"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from staff_admin.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from staff_admin.observability.logging import current_correlation_id, get_logger

_logger = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register staff_admin error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "detail": {}, "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``     → 400 (body also carries ``errors``)
    ``NotFoundError``       → 404
    ``ConflictError``       → 409
    ``DomainError``         → 422
    ``InfrastructureError`` → 503
    """

    def __init__(self) -> None:
        # more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (ConflictError, 409),
            (DomainError, 422),
            (InfrastructureError, 503),
        ]

    def status_for(self, exc: Exception) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on *app*."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

    @staticmethod
    def _make_handler(status: int) -> Callable[[Request, Exception], Awaitable[JSONResponse]]:
        async def handler(request: Request, exc: Exception) -> JSONResponse:
            if isinstance(exc, BaseError):
                body = exc.to_dict()
            else:
                body = {"code": "error", "message": str(exc)}
            body.pop("cause", None)
            body["correlation_id"] = current_correlation_id()
            if status >= 500:
                _logger.error("http.error", path=request.url.path, status=status, code=body["code"])
            return JSONResponse(status_code=status, content=body)

        return handler


__all__ = ["FastAPIExceptionMapper"]
