"""Application search – Predicate and QueryDescriptor value objects."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from staff_admin.application.pagination import PageRequest, Sort

__all__ = ["Operator", "Predicate", "QueryDescriptor"]


class Operator(str, Enum):
    EQ = "="
    ICONTAINS = "contains-case-insensitive"
    GTE = ">="
    LTE = "<="


@dataclass(frozen=True)
class Predicate:
    """A single filter condition on one attribute."""
    attribute: str
    operator: Operator
    value: Any

    def as_tuple(self) -> tuple[str, str, Any]:
        return (self.attribute, self.operator.value, self.value)


@dataclass(frozen=True)
class QueryDescriptor:
    """Fully specified query ready for a data-access layer.

    An empty ``predicates`` tuple means "no filtering".
    """
    predicates: tuple[Predicate, ...]
    sort: Sort
    page: PageRequest

    @property
    def is_filtered(self) -> bool:
        return bool(self.predicates)

    def as_tuples(self) -> list[tuple[str, str, Any]]:
        return [p.as_tuple() for p in self.predicates]
