"""Domain errors: rule violations on employee records and search input."""

from __future__ import annotations

from typing import Any, Mapping

from staff_admin.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of ``{"field": ..., "message": ...}`` entries, one
    per failing field, in the order the rules were evaluated.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def from_fields(cls, field_errors: Mapping[str, str], message: str = "Validation failed") -> "ValidationError":
        """Build from a ``{field: message}`` mapping."""
        return cls(
            message,
            errors=[{"field": name, "message": msg} for name, msg in field_errors.items()],
        )

    @property
    def fields(self) -> dict[str, str]:
        return {e["field"]: e["message"] for e in self.errors if "field" in e}

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        *,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        msg = message or f"{resource} not found"
        if message is None and identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
