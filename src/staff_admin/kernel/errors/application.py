"""Application-layer errors: programmer mistakes and absorbed request quirks."""

from __future__ import annotations

from typing import Any

from staff_admin.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class SchemaError(ApplicationError):
    """An entity schema is empty or internally inconsistent.

    Raised while the schema is being built, never at request time.
    """

    default_code = "schema_error"


class UnsupportedSortError(ApplicationError):
    """A sort attribute outside the schema's allow-list was requested."""

    default_code = "unsupported_sort"

    def __init__(self, attribute: str, *, allowed: tuple[str, ...] = (), **kwargs: Any) -> None:
        super().__init__(f"Sorting by '{attribute}' is not supported", **kwargs)
        self.attribute = attribute
        self.allowed = allowed


__all__ = [
    "ApplicationError",
    "SchemaError",
    "UnsupportedSortError",
]
