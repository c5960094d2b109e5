"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

from staff_admin.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """One page of results plus the total-count metadata needed to render pagers."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def first_index(self) -> int:
        """1-based position of the first item on this page (0 when empty)."""
        if not self.items:
            return 0
        return (self.page - 1) * self.size + 1

    @property
    def last_index(self) -> int:
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    def meta(self) -> dict[str, int | bool]:
        return {
            "total": self.total,
            "page": self.page,
            "per_page": self.size,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
        }

    @classmethod
    def of(cls, all_items: list[T], request: PageRequest) -> "Page[T]":
        """Build a :class:`Page` by slicing *all_items* with *request*."""
        start = request.offset
        return cls(
            items=all_items[start:start + request.size],
            total=len(all_items),
            page=request.page,
            size=request.size,
        )


__all__ = ["Page"]
