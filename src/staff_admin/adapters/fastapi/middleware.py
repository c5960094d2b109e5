"""FastAPI adapter – correlation-id ASGI middleware."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from staff_admin.observability.logging import bind_correlation_id

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


class FastAPICorrelationIdMiddleware:
    """Extract correlation ID from request headers, propagate to logs and response.

    Header resolution order:
    1. ``X-Correlation-ID``
    2. ``X-Request-ID``
    3. W3C ``traceparent`` trace-id segment
    4. Generated UUID v4
    """

    def __init__(
        self,
        app: "ASGIApp",
        header_name: str = "X-Correlation-ID",
        fallback_headers: tuple[str, ...] = ("X-Request-ID",),
    ) -> None:
        self.app = app
        self._response_header = header_name.lower().encode()
        self._request_headers: list[bytes] = [
            header_name.lower().encode(),
            *[h.lower().encode() for h in fallback_headers],
        ]

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        correlation_id = ""
        for header in self._request_headers:
            correlation_id = headers.get(header, b"").decode().strip()
            if correlation_id:
                break
        if not correlation_id:
            correlation_id = _trace_id(headers.get(b"traceparent", b"").decode())
        correlation_id = correlation_id or str(uuid4())

        structlog.contextvars.clear_contextvars()
        bind_correlation_id(correlation_id)

        response_header = self._response_header
        encoded_id = correlation_id.encode()

        async def send_with_header(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        await self.app(scope, receive, send_with_header)


def _trace_id(traceparent: str) -> str:
    # version-traceid-parentid-flags
    parts = traceparent.strip().split("-")
    if len(parts) == 4 and len(parts[1]) == 32:
        return parts[1]
    return ""


__all__ = ["FastAPICorrelationIdMiddleware"]
