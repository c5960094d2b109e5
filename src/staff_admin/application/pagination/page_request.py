"""Application pagination – PageRequest, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum

DEFAULT_PAGE_SIZE = 10


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion.

    The token form used in query strings is ``"name"`` for ascending and
    ``"-name"`` for descending order.
    """
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, token: str) -> "Sort":
        token = token.strip()
        if token.startswith("-"):
            return cls(token[1:].strip(), SortDirection.DESC)
        return cls(token, SortDirection.ASC)

    @property
    def token(self) -> str:
        prefix = "-" if self.direction is SortDirection.DESC else ""
        return f"{prefix}{self.field}"


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (1-based page index)."""
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def clamped(self, max_size: int | None) -> "PageRequest":
        """Return a copy whose size does not exceed *max_size*."""
        if max_size is None or self.size <= max_size:
            return self
        return dataclasses.replace(self, size=max_size)


__all__ = ["DEFAULT_PAGE_SIZE", "PageRequest", "Sort", "SortDirection"]
