"""CSV rendering for the employee export download."""
from __future__ import annotations

import csv
import io

from staff_admin.application.export.request import ExportRequest

__all__ = ["CsvExporter"]

_BOM = "\ufeff"


class CsvExporter:
    """Render an :class:`ExportRequest` as one UTF-8 CSV document.

    The header row comes from the column titles; every row is formatted
    through its :class:`ColumnDef`.  ``bom`` prefixes a byte-order mark,
    which spreadsheet tools use to detect the encoding.
    """

    media_type = "text/csv"

    def __init__(
        self,
        delimiter: str = ",",
        quoting: int = csv.QUOTE_MINIMAL,
        *,
        bom: bool = False,
    ) -> None:
        self._delimiter = delimiter
        self._quoting = quoting
        self._bom = bom

    async def export(self, request: ExportRequest) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out, delimiter=self._delimiter, quoting=self._quoting)
        writer.writerow([column.header for column in request.columns])
        async for record in request.rows:
            writer.writerow([column.render(record.get(column.key)) for column in request.columns])

        text = out.getvalue()
        return (_BOM + text if self._bom else text).encode("utf-8")
