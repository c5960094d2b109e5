"""SQLAlchemy adapter – session factory, unit of work, ORM model, repositories."""
from staff_admin.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from staff_admin.adapters.sqlalchemy.mixins import TimestampMixin
from staff_admin.adapters.sqlalchemy.models import Base, EmployeeRecord
from staff_admin.adapters.sqlalchemy.query import apply_descriptor, predicate_clause
from staff_admin.adapters.sqlalchemy.repository import SqlAlchemyEmployeeRepository, SqlAlchemyRepositoryBase
from staff_admin.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "EmployeeRecord",
    "SqlAlchemyEmployeeRepository",
    "SqlAlchemyRepositoryBase",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "TimestampMixin",
    "apply_descriptor",
    "predicate_clause",
]
