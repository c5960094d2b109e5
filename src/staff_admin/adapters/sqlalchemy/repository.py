"""SQLAlchemy adapter – descriptor-driven repositories."""
from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staff_admin.adapters.sqlalchemy.models import EmployeeRecord
from staff_admin.adapters.sqlalchemy.query import apply_descriptor
from staff_admin.application.pagination import Page
from staff_admin.application.search import QueryDescriptor
from staff_admin.kernel.errors import NotFoundError

TModel = TypeVar("TModel")


class SqlAlchemyRepositoryBase(Generic[TModel]):
    """Generic async repository for one mapped class.

    Searching goes through :func:`apply_descriptor`, so any entity with an
    :class:`~staff_admin.application.search.EntitySchema` gets filtering,
    sorting and pagination for free.
    """

    not_found_message: str | None = None

    def __init__(self, session: AsyncSession, model_class: type[TModel]) -> None:
        self._session = session
        self._model = model_class

    async def get(self, id: Any) -> TModel | None:
        return await self._session.get(self._model, id)

    async def get_or_raise(self, id: Any) -> TModel:
        obj = await self.get(id)
        if obj is None:
            raise NotFoundError(self._model.__name__, id, message=self.not_found_message)
        return obj

    async def add(self, obj: TModel) -> TModel:
        self._session.add(obj)
        await self._session.flush()
        await self._session.refresh(obj)
        return obj

    async def save(self, obj: TModel) -> TModel:
        await self._session.flush()
        await self._session.refresh(obj)
        return obj

    async def delete(self, obj: TModel) -> None:
        await self._session.delete(obj)
        await self._session.flush()

    async def search(self, descriptor: QueryDescriptor) -> Page[TModel]:
        """One page of matching rows plus the total match count."""
        filtered = apply_descriptor(select(self._model), self._model, descriptor, paginate=False)
        count_stmt = select(func.count()).select_from(filtered.order_by(None).subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        paged = apply_descriptor(select(self._model), self._model, descriptor)
        items = list((await self._session.execute(paged)).scalars().all())
        return Page(items=items, total=total, page=descriptor.page.page, size=descriptor.page.size)

    async def find_all(self, descriptor: QueryDescriptor) -> list[TModel]:
        """Every matching row in descriptor order, ignoring pagination."""
        stmt = apply_descriptor(select(self._model), self._model, descriptor, paginate=False)
        return list((await self._session.execute(stmt)).scalars().all())


class SqlAlchemyEmployeeRepository(SqlAlchemyRepositoryBase[EmployeeRecord]):
    """Employee-specific queries on top of the generic repository."""

    not_found_message = "The requested employee does not exist."

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, EmployeeRecord)

    async def create(self, **fields: Any) -> EmployeeRecord:
        return await self.add(EmployeeRecord(**fields))

    async def email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        stmt = select(EmployeeRecord.id).where(func.lower(EmployeeRecord.email) == email.strip().lower())
        if exclude_id is not None:
            stmt = stmt.where(EmployeeRecord.id != exclude_id)
        return (await self._session.execute(stmt.limit(1))).first() is not None

    async def delete_many(self, ids: Iterable[int]) -> int:
        """Delete the rows with the given ids; unknown ids are skipped."""
        stmt = select(EmployeeRecord).where(EmployeeRecord.id.in_(set(ids)))
        records = list((await self._session.execute(stmt)).scalars().all())
        for record in records:
            await self._session.delete(record)
        await self._session.flush()
        return len(records)

    async def statistics(self) -> dict[str, float | int]:
        stmt = select(
            func.count(EmployeeRecord.id),
            func.sum(EmployeeRecord.salary),
            func.avg(EmployeeRecord.salary),
            func.max(EmployeeRecord.salary),
            func.min(EmployeeRecord.salary),
        )
        count, total, average, highest, lowest = (await self._session.execute(stmt)).one()
        return {
            "total_employees": int(count or 0),
            "total_salary_expense": float(total or 0),
            "average_salary": float(average or 0),
            "highest_salary": float(highest or 0),
            "lowest_salary": float(lowest or 0),
        }


__all__ = ["SqlAlchemyEmployeeRepository", "SqlAlchemyRepositoryBase"]
