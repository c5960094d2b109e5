"""Employee use-cases: search, CRUD, batch delete, CSV export and statistics."""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, AsyncIterator, Callable, Iterable, Mapping, Protocol

from staff_admin.application.employees.model import HIGH_EARNER_THRESHOLD, EmployeeRules
from staff_admin.application.employees.search import EMPLOYEE_SCHEMA
from staff_admin.application.export import ColumnDef, CsvExporter, ExportRequest
from staff_admin.application.pagination import Page
from staff_admin.application.search import QueryDescriptor, QueryFilterBuilder
from staff_admin.kernel.errors import ValidationError
from staff_admin.observability.logging import get_logger

__all__ = ["ActionResult", "EmployeeService", "ExportFile", "SearchOutcome"]

_logger = get_logger(__name__)

EXPORT_COLUMNS = [
    ColumnDef("id", "ID"),
    ColumnDef("name", "Name"),
    ColumnDef("email", "Email"),
    ColumnDef("position", "Position"),
    ColumnDef("salary", "Salary", format="decimal"),
    ColumnDef("created_at", "Created At", format="datetime"),
    ColumnDef("updated_at", "Updated At", format="datetime"),
]


class UnitOfWork(Protocol):
    """What the service needs from a unit of work (see ``SqlAlchemyUnitOfWork``)."""

    employees: Any

    async def __aenter__(self) -> "UnitOfWork": ...
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...


@dataclass
class SearchOutcome:
    """A page of employees plus the search-form errors, if any.

    When ``errors`` is non-empty the page is the unfiltered listing.
    """

    page: Page[Any]
    descriptor: QueryDescriptor
    errors: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a write, in place of a flash message."""

    success: bool
    message: str
    employee: Any = None
    count: int | None = None


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    media_type: str = CsvExporter.media_type


class EmployeeService:
    """Employee administration use-cases.

    ``uow_factory`` returns a fresh unit of work per call; every use-case
    runs in its own transaction.
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        *,
        builder: QueryFilterBuilder | None = None,
        exporter: CsvExporter | None = None,
        clock: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._builder = builder or QueryFilterBuilder(EMPLOYEE_SCHEMA)
        self._exporter = exporter or CsvExporter()
        self._rules = EmployeeRules()
        self._clock = clock or (lambda: datetime.datetime.now(datetime.UTC))

    @property
    def builder(self) -> QueryFilterBuilder:
        return self._builder

    # Reads ---------------------------------------------------------------

    async def search(
        self,
        raw_input: Mapping[str, Any] | None = None,
        *,
        sort: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> SearchOutcome:
        result = self._builder.build(raw_input, sort=sort, page=page, page_size=page_size)
        async with self._uow_factory() as uow:
            found = await uow.employees.search(result.descriptor)
        return SearchOutcome(page=found, descriptor=result.descriptor, errors=dict(result.errors))

    async def search_high_earners(
        self,
        threshold: Decimal | int | str = HIGH_EARNER_THRESHOLD,
        *,
        page: int = 1,
    ) -> SearchOutcome:
        return await self.search({"salary_min": str(threshold)}, sort="-salary", page=page)

    async def search_by_position(self, position: str, *, page: int = 1) -> SearchOutcome:
        return await self.search({"position_exact": position}, sort="name", page=page)

    async def get(self, employee_id: int) -> Any:
        async with self._uow_factory() as uow:
            return await uow.employees.get_or_raise(employee_id)

    async def statistics(self) -> dict[str, float | int]:
        async with self._uow_factory() as uow:
            return await uow.employees.statistics()

    async def export_csv(
        self,
        raw_input: Mapping[str, Any] | None = None,
        *,
        sort: str | None = None,
    ) -> ExportFile:
        """Every employee matching the search form, as CSV."""
        result = self._builder.build(raw_input, sort=sort)
        async with self._uow_factory() as uow:
            records = await uow.employees.find_all(result.descriptor)

        async def rows() -> AsyncIterator[dict[str, Any]]:
            for record in records:
                yield record.to_dict()

        filename = f"employees_{self._clock():%Y%m%d_%H%M%S}.csv"
        content = await self._exporter.export(
            ExportRequest(columns=EXPORT_COLUMNS, rows=rows(), filename=filename)
        )
        return ExportFile(filename=filename, content=content)

    # Writes --------------------------------------------------------------

    async def create(self, data: Mapping[str, Any]) -> ActionResult:
        cleaned = self._rules.clean(data)
        async with self._uow_factory() as uow:
            await self._check_email(uow, cleaned["email"])
            record = await uow.employees.create(**cleaned)
        _logger.info("employee.created", employee_id=record.id)
        return ActionResult(True, "Employee created successfully!", employee=record)

    async def update(self, employee_id: int, data: Mapping[str, Any]) -> ActionResult:
        async with self._uow_factory() as uow:
            record = await uow.employees.get_or_raise(employee_id)
            cleaned = self._rules.clean(data)
            await self._check_email(uow, cleaned["email"], exclude_id=employee_id)
            for name, value in cleaned.items():
                setattr(record, name, value)
            record = await uow.employees.save(record)
        _logger.info("employee.updated", employee_id=employee_id)
        return ActionResult(True, "Employee updated successfully!", employee=record)

    async def delete(self, employee_id: int) -> ActionResult:
        async with self._uow_factory() as uow:
            record = await uow.employees.get_or_raise(employee_id)
            await uow.employees.delete(record)
        return ActionResult(True, "Employee deleted successfully!", count=1)

    async def batch_delete(self, ids: Iterable[int]) -> ActionResult:
        """Delete several employees in one transaction; unknown ids are skipped."""
        unique_ids = sorted(set(ids))
        if not unique_ids:
            raise ValidationError.from_fields({"ids": "Select at least one employee."})
        async with self._uow_factory() as uow:
            deleted = await uow.employees.delete_many(unique_ids)
        _logger.info("employee.batch_deleted", requested=len(unique_ids), deleted=deleted)
        return ActionResult(True, f"{deleted} employee(s) deleted successfully!", count=deleted)

    async def _check_email(self, uow: UnitOfWork, email: str, *, exclude_id: int | None = None) -> None:
        if await uow.employees.email_taken(email, exclude_id=exclude_id):
            raise ValidationError.from_fields(
                {"email": "This email address is already registered."},
                "Employee data is invalid",
            )
