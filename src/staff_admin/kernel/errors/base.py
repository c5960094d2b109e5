"""BaseError: common shape of every error raised by staff_admin."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Message, stable ``code`` slug, ``detail`` payload and optional cause.

    ``to_dict`` is what the HTTP layer returns as the error body, minus
    ``cause``.  Subclasses may add keys, as ``ValidationError`` does with ``errors``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe payload with ``code``, ``message``, ``detail`` and, if set, ``cause``."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
