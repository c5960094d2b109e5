"""SQLAlchemy adapter – SqlAlchemyUnitOfWork."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from staff_admin.adapters.sqlalchemy.repository import SqlAlchemyEmployeeRepository
from staff_admin.kernel.errors import ConflictError, PersistenceError


class SqlAlchemyUnitOfWork:
    """One session, one transaction.

    Commits on a clean exit and rolls back when the block raises.  Driver
    errors surface as :class:`ConflictError` (constraint violations) or
    :class:`PersistenceError`.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._factory = session_factory
        self.session: Any = None
        self.employees: Any = None

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self.session = self._factory()
        self.employees = SqlAlchemyEmployeeRepository(self.session)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()
        if isinstance(exc_val, SQLAlchemyError):
            raise _translate(exc_val) from exc_val

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise _translate(exc) from exc

    async def rollback(self) -> None:
        await self.session.rollback()


def _translate(exc: SQLAlchemyError) -> Exception:
    if isinstance(exc, IntegrityError):
        return ConflictError("The change conflicts with existing data", cause=exc)
    return PersistenceError("Database operation failed", cause=exc)


__all__ = ["SqlAlchemyUnitOfWork"]
