"""Employee administration – domain rules, search form and use-cases."""
from staff_admin.application.employees.model import (
    ATTRIBUTE_LABELS,
    HIGH_EARNER_THRESHOLD,
    EmployeeRules,
    format_salary,
    initials,
    is_high_earner,
    normalize_email,
    normalize_name,
)
from staff_admin.application.employees.search import EMPLOYEE_SCHEMA, SORTABLE_ATTRIBUTES
from staff_admin.application.employees.service import (
    ActionResult,
    EmployeeService,
    ExportFile,
    SearchOutcome,
)

__all__ = [
    "ATTRIBUTE_LABELS",
    "ActionResult",
    "EMPLOYEE_SCHEMA",
    "EmployeeRules",
    "EmployeeService",
    "ExportFile",
    "HIGH_EARNER_THRESHOLD",
    "SORTABLE_ATTRIBUTES",
    "SearchOutcome",
    "format_salary",
    "initials",
    "is_high_earner",
    "normalize_email",
    "normalize_name",
]
