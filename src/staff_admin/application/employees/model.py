"""Employee domain – normalisation, write rules and presentation helpers."""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Mapping

from staff_admin.kernel.errors import ValidationError

__all__ = [
    "ATTRIBUTE_LABELS",
    "HIGH_EARNER_THRESHOLD",
    "MAX_SALARY",
    "MIN_SALARY",
    "EmployeeRules",
    "format_salary",
    "initials",
    "is_high_earner",
    "normalize_email",
    "normalize_name",
]

MIN_SALARY: Final = Decimal("0")
MAX_SALARY: Final = Decimal("999999.99")
HIGH_EARNER_THRESHOLD: Final = Decimal("80000")

_MAX_LENGTH: Final = 100
_MIN_NAME_LENGTH: Final = 2
_EMAIL_PATTERN: Final = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")
_NUMBER: Final = re.compile(r"^\s*[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?\s*$")
_WORD_START: Final = re.compile(r"(^|\s)(\S)")

ATTRIBUTE_LABELS: Final[Mapping[str, str]] = {
    "id": "Employee ID",
    "name": "Full Name",
    "email": "Email Address",
    "position": "Job Position",
    "salary": "Monthly Salary",
    "created_at": "Created At",
    "updated_at": "Last Updated",
}


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_name(name: str) -> str:
    """Lower-case, then capitalise the first letter of each whitespace-separated word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), name.strip().lower())


def format_salary(salary: Decimal | float | None) -> str:
    if salary is None:
        return "Not specified"
    return f"${Decimal(str(salary)):,.2f}"


def initials(name: str) -> str:
    letters = "".join(part[0].upper() for part in name.strip().split(" ") if part)
    return letters[:2]


def is_high_earner(salary: Decimal | float | None) -> bool:
    return salary is not None and Decimal(str(salary)) > HIGH_EARNER_THRESHOLD


class EmployeeRules:
    """Write-side validation shared by create and update.

    ``clean`` trims text fields, converts ``salary`` to ``Decimal`` (blank
    becomes ``None``) and raises one :class:`ValidationError` listing every
    failing field.  Email uniqueness needs the database and is checked by
    the service.
    """

    fields = ("name", "email", "position", "salary")

    def clean(self, data: Mapping[str, Any]) -> dict[str, Any]:
        errors: dict[str, str] = {}
        cleaned: dict[str, Any] = {}

        for name in ("name", "email", "position"):
            value = data.get(name)
            text = "" if value is None else str(value).strip()
            cleaned[name] = text
            label = ATTRIBUTE_LABELS[name]
            if not text:
                errors[name] = f"{label} cannot be blank."
            elif len(text) > _MAX_LENGTH:
                errors[name] = f"{label} should contain at most {_MAX_LENGTH} characters."

        if "email" not in errors and not _EMAIL_PATTERN.match(cleaned["email"]):
            errors["email"] = "Please enter a valid email address."
        if "name" not in errors and len(cleaned["name"]) < _MIN_NAME_LENGTH:
            errors["name"] = f"Name must be at least {_MIN_NAME_LENGTH} characters."

        try:
            cleaned["salary"] = self._salary(data.get("salary"))
        except ValueError as exc:
            errors["salary"] = str(exc)

        if errors:
            raise ValidationError.from_fields(errors, "Employee data is invalid")
        return cleaned

    @staticmethod
    def _salary(value: Any) -> Decimal | None:
        label = ATTRIBUTE_LABELS["salary"]
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool) or not _NUMBER.match(str(value)):
            raise ValueError(f"{label} must be a number.")
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"{label} must be a number.") from exc
        if amount < MIN_SALARY:
            raise ValueError(f"{label} must be no less than {MIN_SALARY}.")
        if amount > MAX_SALARY:
            raise ValueError(f"{label} must be no greater than {MAX_SALARY}.")
        return amount
