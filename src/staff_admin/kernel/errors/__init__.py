"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    │   ├── SchemaError
    │   └── UnsupportedSortError
    └── InfrastructureError  (infrastructure.py)
        └── PersistenceError
"""

from staff_admin.kernel.errors.application import (
    ApplicationError,
    SchemaError,
    UnsupportedSortError,
)
from staff_admin.kernel.errors.base import BaseError
from staff_admin.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from staff_admin.kernel.errors.infrastructure import InfrastructureError, PersistenceError

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
