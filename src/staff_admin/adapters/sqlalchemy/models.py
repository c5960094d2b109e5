"""SQLAlchemy adapter – ORM model for the ``employee`` table and its lifecycle hooks."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import Integer, Numeric, String, event
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from staff_admin.adapters.sqlalchemy.mixins import TimestampMixin
from staff_admin.application.employees.model import (
    format_salary,
    initials,
    is_high_earner,
    normalize_email,
    normalize_name,
)
from staff_admin.observability.logging import get_logger

_logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class EmployeeRecord(TimestampMixin, Base):
    """One row of the ``employee`` table."""

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(100), unique=True)
    position: Mapped[str] = mapped_column(String(100), index=True)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, default=None)

    @property
    def formatted_salary(self) -> str:
        return format_salary(self.salary)

    @property
    def initials(self) -> str:
        return initials(self.name)

    @property
    def is_high_earner(self) -> bool:
        return is_high_earner(self.salary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "position": self.position,
            "salary": self.salary,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __repr__(self) -> str:
        return f"EmployeeRecord(id={self.id!r}, email={self.email!r})"


@event.listens_for(EmployeeRecord, "before_insert")
@event.listens_for(EmployeeRecord, "before_update")
def _normalize_before_save(mapper: Any, connection: Any, target: EmployeeRecord) -> None:  # noqa: ARG001
    target.email = normalize_email(target.email)
    target.name = normalize_name(target.name)
    target.truncate_timestamps()


@event.listens_for(EmployeeRecord, "after_delete")
def _log_after_delete(mapper: Any, connection: Any, target: EmployeeRecord) -> None:  # noqa: ARG001
    _logger.info("employee.deleted", employee_id=target.id, name=target.name)


__all__ = ["Base", "EmployeeRecord"]
