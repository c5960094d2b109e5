"""Kernel – framework-agnostic building blocks."""

from staff_admin.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    PersistenceError,
    SchemaError,
    UnsupportedSortError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "PersistenceError",
    "SchemaError",
    "UnsupportedSortError",
    "ValidationError",
]
