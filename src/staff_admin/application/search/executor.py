"""Application search – InMemoryQueryExecutor."""
from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any, Callable, Generic, TypeVar

from staff_admin.application.pagination import Page, SortDirection
from staff_admin.application.search.query import Operator, Predicate, QueryDescriptor

T = TypeVar("T")

__all__ = ["InMemoryQueryExecutor"]


class InMemoryQueryExecutor(Generic[T]):
    """Runs a :class:`QueryDescriptor` over a list of dict-like objects.

    Mirrors the SQL translation: comparisons are inclusive, ``None`` never
    matches a predicate and partial matches ignore case.
    """

    def __init__(self, items: list[T], key_fn: Callable[[T], dict[str, Any]] | None = None) -> None:
        self._items = items
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or (lambda x: x if isinstance(x, dict) else x.__dict__)

    def filter(self, descriptor: QueryDescriptor) -> list[T]:
        """Matching items, sorted, without pagination."""
        matched = [
            item for item in self._items
            if all(self._matches(self._key_fn(item), p) for p in descriptor.predicates)
        ]
        field = descriptor.sort.field
        present = [i for i in matched if self._key_fn(i).get(field) is not None]
        missing = [i for i in matched if self._key_fn(i).get(field) is None]
        present.sort(
            key=lambda i: self._key_fn(i)[field],
            reverse=descriptor.sort.direction is SortDirection.DESC,
        )
        return present + missing

    def execute(self, descriptor: QueryDescriptor) -> Page[T]:
        return Page.of(self.filter(descriptor), descriptor.page)

    @staticmethod
    def _matches(record: dict[str, Any], predicate: Predicate) -> bool:
        value = record.get(predicate.attribute)
        if value is None:
            return False
        expected = _align(value, predicate.value)
        match predicate.operator:
            case Operator.EQ:        return value == expected
            case Operator.GTE:       return value >= expected
            case Operator.LTE:       return value <= expected
            case Operator.ICONTAINS: return str(predicate.value).lower() in _as_text(value).lower()
            case _:
                raise ValueError(f"Unsupported operator: {predicate.operator!r}")


def _align(actual: Any, expected: Any) -> Any:
    """Coerce a predicate value to the type of the stored value."""
    if isinstance(actual, datetime.datetime) and isinstance(expected, str):
        parsed = datetime.datetime.fromisoformat(expected)
        if actual.tzinfo is not None and parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=actual.tzinfo)
        return parsed
    if isinstance(actual, (int, float, Decimal)) and not isinstance(actual, bool):
        if isinstance(expected, str):
            return Decimal(expected)
        if isinstance(expected, Decimal) and isinstance(actual, float):
            return float(expected)
    return expected


def _as_text(value: Any) -> str:
    if isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return str(value)
