"""Application export – ExportRequest and ColumnDef."""
from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, AsyncIterator

__all__ = ["ColumnDef", "ExportRequest"]


@dataclass(frozen=True)
class ColumnDef:
    """Defines a single column in an export."""

    key: str          # dict key to read from each row
    header: str       # column header text
    format: str = ""  # "", "datetime" or "decimal"

    def render(self, value: Any) -> Any:
        if value is None:
            return ""
        if self.format == "datetime" and isinstance(value, (datetime.date, datetime.datetime)):
            return value.strftime("%Y-%m-%d %H:%M:%S")
        if self.format == "decimal" and isinstance(value, (int, float, Decimal)):
            return f"{Decimal(str(value)):.2f}"
        return value


@dataclass
class ExportRequest:
    """Describes a data export to be performed."""

    columns: list[ColumnDef]
    rows: AsyncIterator[dict[str, Any]]
    filename: str = "export.csv"
