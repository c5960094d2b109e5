"""FastAPI adapter – request and response bodies."""
from __future__ import annotations

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class EmployeeIn(BaseModel):
    """Create/update body.

    Fields stay loosely typed so that the employee rules, not pydantic,
    produce the per-field messages.
    """

    name: str | None = None
    email: str | None = None
    position: str | None = None
    salary: str | int | float | None = None


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    position: str
    salary: Decimal | None = None
    formatted_salary: str
    initials: str
    is_high_earner: bool
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None


class EmployeePage(BaseModel):
    items: list[EmployeeOut]
    total: int
    page: int
    per_page: int
    total_pages: int
    has_next: bool
    has_previous: bool
    sort: str
    errors: dict[str, str] = Field(default_factory=dict)


class ActionOut(BaseModel):
    success: bool
    message: str
    employee: EmployeeOut | None = None
    count: int | None = None


class BatchDeleteIn(BaseModel):
    ids: list[int] = Field(default_factory=list)


__all__ = ["ActionOut", "BatchDeleteIn", "EmployeeIn", "EmployeeOut", "EmployeePage"]
