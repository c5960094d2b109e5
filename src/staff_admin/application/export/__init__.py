"""Application export – CSV export of query results."""
from staff_admin.application.export.request import ColumnDef, ExportRequest
from staff_admin.application.export.csv_export import CsvExporter

__all__ = ["ColumnDef", "CsvExporter", "ExportRequest"]
