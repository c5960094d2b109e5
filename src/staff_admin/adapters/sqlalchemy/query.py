"""SQLAlchemy adapter – translate a QueryDescriptor into a ``Select``."""
from __future__ import annotations

import datetime
from typing import Any

from sqlalchemy import Column, DateTime, Select, String, cast, inspect
from sqlalchemy.sql.elements import ColumnElement

from staff_admin.application.pagination import SortDirection
from staff_admin.application.search import Operator, Predicate, QueryDescriptor

__all__ = ["apply_descriptor", "predicate_clause"]


def _column(model: type[Any], attribute: str) -> Column[Any]:
    columns = inspect(model).columns
    if attribute not in columns:
        raise ValueError(f"{model.__name__} has no column {attribute!r}")
    return columns[attribute]


def _bound(column: Column[Any], value: Any) -> Any:
    if isinstance(column.type, DateTime) and isinstance(value, str):
        return datetime.datetime.fromisoformat(value)
    return value


def predicate_clause(model: type[Any], predicate: Predicate) -> ColumnElement[bool]:
    """SQL expression for one predicate."""
    column = _column(model, predicate.attribute)
    match predicate.operator:
        case Operator.EQ:
            return column == _bound(column, predicate.value)
        case Operator.GTE:
            return column >= _bound(column, predicate.value)
        case Operator.LTE:
            return column <= _bound(column, predicate.value)
        case Operator.ICONTAINS:
            target = column if isinstance(column.type, String) else cast(column, String)
            return target.icontains(str(predicate.value), autoescape=True)
    raise ValueError(f"Unsupported operator: {predicate.operator!r}")


def apply_descriptor(
    stmt: Select[Any],
    model: type[Any],
    descriptor: QueryDescriptor,
    *,
    paginate: bool = True,
) -> Select[Any]:
    """Add WHERE, ORDER BY and (optionally) LIMIT/OFFSET from *descriptor*."""
    for predicate in descriptor.predicates:
        stmt = stmt.where(predicate_clause(model, predicate))

    sort_column = _column(model, descriptor.sort.field)
    stmt = stmt.order_by(
        sort_column.desc() if descriptor.sort.direction is SortDirection.DESC else sort_column.asc()
    )
    if paginate:
        stmt = stmt.limit(descriptor.page.size).offset(descriptor.page.offset)
    return stmt
