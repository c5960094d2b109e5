"""Employee search form: attribute types, filter policies and sortable columns."""
from __future__ import annotations

from staff_admin.application.employees.model import ATTRIBUTE_LABELS
from staff_admin.application.search import AttributeSpec, AttributeType, EntitySchema, FilterPolicy

__all__ = ["EMPLOYEE_SCHEMA", "SORTABLE_ATTRIBUTES"]

_INT = AttributeType.INTEGER
_TEXT = AttributeType.TEXT
_DEC = AttributeType.DECIMAL
_TS = AttributeType.TIMESTAMP

SORTABLE_ATTRIBUTES = ("id", "name", "email", "position", "salary", "created_at", "updated_at")

EMPLOYEE_SCHEMA = EntitySchema(
    entity="employee",
    attributes=(
        AttributeSpec("id", _INT, FilterPolicy.EXACT, label=ATTRIBUTE_LABELS["id"]),
        AttributeSpec("name", _TEXT, FilterPolicy.PARTIAL_TEXT, label=ATTRIBUTE_LABELS["name"]),
        AttributeSpec("email", _TEXT, FilterPolicy.PARTIAL_TEXT, label=ATTRIBUTE_LABELS["email"]),
        AttributeSpec("position", _TEXT, FilterPolicy.PARTIAL_TEXT, label=ATTRIBUTE_LABELS["position"]),
        AttributeSpec("salary", _DEC, FilterPolicy.EXACT, label=ATTRIBUTE_LABELS["salary"]),
        AttributeSpec("salary_min", _DEC, FilterPolicy.RANGE_LOWER, label="Minimum Salary"),
        AttributeSpec("salary_max", _DEC, FilterPolicy.RANGE_UPPER, label="Maximum Salary"),
        AttributeSpec("created_from", _TS, FilterPolicy.RANGE_LOWER, target="created_at", label="Created From"),
        AttributeSpec("created_to", _TS, FilterPolicy.RANGE_UPPER, target="created_at", label="Created To"),
        AttributeSpec("created_at", _TS, FilterPolicy.PARTIAL_TEXT, label=ATTRIBUTE_LABELS["created_at"]),
        AttributeSpec("updated_at", _TS, FilterPolicy.PARTIAL_TEXT, label=ATTRIBUTE_LABELS["updated_at"]),
        # exact-match companion used by position lookups
        AttributeSpec("position_exact", _TEXT, FilterPolicy.EXACT, target="position", label=ATTRIBUTE_LABELS["position"]),
    ),
    primary_key="id",
    sortable=SORTABLE_ATTRIBUTES,
    default_page_size=10,
)
