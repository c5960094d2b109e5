"""Application search – per-type coercion of raw search input."""
from __future__ import annotations

import datetime
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Mapping

from staff_admin.application.search.schema import AttributeSpec, AttributeType, EntitySchema, FilterPolicy

__all__ = ["coerce_value", "is_blank", "validate_input"]

_INTEGER: Final = re.compile(r"^\s*[+-]?\d+\s*$")
_NUMBER: Final = re.compile(r"^\s*[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?\s*$")
_ISO_DATE: Final = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# signed 64-bit, the widest integer column SQLite and most drivers bind
INTEGER_MIN: Final = -(2**63)
INTEGER_MAX: Final = 2**63 - 1


def is_blank(value: Any) -> bool:
    """``None``, ``""`` and whitespace-only strings count as "not provided"."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def coerce_value(spec: AttributeSpec, value: Any, label: str | None = None) -> Any:
    """Convert *value* to the Python type of *spec*.

    Raises :class:`ValueError` carrying the user-facing message.
    """
    label = label or spec.display_label
    if spec.type is AttributeType.INTEGER:
        message = f"{label} must be an integer."
        if isinstance(value, bool):
            raise ValueError(message)
        if isinstance(value, int):
            number = value
        else:
            text = str(value).strip()
            # length check keeps int() away from the interpreter digit limit
            if not _INTEGER.match(text) or len(text.lstrip("+-").lstrip("0")) > 19:
                raise ValueError(message)
            number = int(text)
        if not INTEGER_MIN <= number <= INTEGER_MAX:
            raise ValueError(message)
        return number

    if spec.type is AttributeType.DECIMAL:
        if isinstance(value, bool) or not _NUMBER.match(str(value)):
            raise ValueError(f"{label} must be a number.")
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"{label} must be a number.") from exc
        if not number.is_finite():
            raise ValueError(f"{label} must be a number.")
        return number

    if spec.type is AttributeType.TIMESTAMP and spec.policy.is_range:
        text = str(value).strip()
        message = f"{label} must be a date in YYYY-MM-DD format."
        if not _ISO_DATE.match(text):
            raise ValueError(message)
        try:
            datetime.date.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(message) from exc
        return text

    if spec.type is AttributeType.TIMESTAMP and spec.policy is FilterPolicy.EXACT:
        text = str(value).strip()
        try:
            datetime.datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"{label} must be a valid date and time.") from exc
        return text

    return value if isinstance(value, str) else str(value)


def validate_input(
    schema: EntitySchema,
    raw_input: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, str]]:
    """Validate every provided value; errors accumulate across attributes.

    Returns ``(validated, errors)`` keyed by input name, both in schema
    declaration order.  Blank values and keys unknown to the schema are
    left out of both.
    """
    validated: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for spec in schema:
        value = raw_input.get(spec.name)
        if is_blank(value):
            continue
        try:
            validated[spec.name] = coerce_value(spec, value)
        except ValueError as exc:
            errors[spec.name] = str(exc)
    return validated, errors
