"""Infrastructure errors: I/O failures."""

from __future__ import annotations

from staff_admin.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PersistenceError(InfrastructureError):
    """The database rejected or failed to execute a statement."""

    default_code = "persistence_error"


__all__ = ["InfrastructureError", "PersistenceError"]
