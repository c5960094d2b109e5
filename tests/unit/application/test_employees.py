"""Unit tests for employee normalisation, write rules and the search form."""
from __future__ import annotations

from decimal import Decimal

import pytest

from staff_admin.application.employees import (
    EMPLOYEE_SCHEMA,
    SORTABLE_ATTRIBUTES,
    EmployeeRules,
    format_salary,
    initials,
    is_high_earner,
    normalize_email,
    normalize_name,
)
from staff_admin.application.search import QueryFilterBuilder
from staff_admin.kernel.errors import ValidationError

VALID = {"name": "Jan Kowalski", "email": "jan@example.com", "position": "Engineer", "salary": "85000"}


class TestNormalisation:
    def test_email_lowercased_and_trimmed(self) -> None:
        assert normalize_email("  Jan.Kowalski@Example.COM ") == "jan.kowalski@example.com"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("jan kowalski", "Jan Kowalski"),
            ("JAN KOWALSKI", "Jan Kowalski"),
            ("mary-jane o'neil", "Mary-jane O'neil"),
            ("  anna  ", "Anna"),
        ],
    )
    def test_name_ucwords(self, raw: str, expected: str) -> None:
        assert normalize_name(raw) == expected


class TestPresentation:
    def test_format_salary(self) -> None:
        assert format_salary(Decimal("85000")) == "$85,000.00"
        assert format_salary(1234.5) == "$1,234.50"

    def test_format_salary_missing(self) -> None:
        assert format_salary(None) == "Not specified"

    def test_initials(self) -> None:
        assert initials("Jan Kowalski") == "JK"
        assert initials("Anna Maria Nowak") == "AM"
        assert initials("Cher") == "C"

    def test_is_high_earner(self) -> None:
        assert is_high_earner(Decimal("80000.01"))
        assert not is_high_earner(Decimal("80000"))
        assert not is_high_earner(None)


class TestEmployeeRules:
    def test_clean_valid(self) -> None:
        cleaned = EmployeeRules().clean({**VALID, "name": "  Jan Kowalski "})
        assert cleaned == {
            "name": "Jan Kowalski",
            "email": "jan@example.com",
            "position": "Engineer",
            "salary": Decimal("85000"),
        }

    @pytest.mark.parametrize("salary", [None, "", "   "])
    def test_salary_optional(self, salary: object) -> None:
        assert EmployeeRules().clean({**VALID, "salary": salary})["salary"] is None

    def test_required_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({})
        assert exc_info.value.fields == {
            "name": "Full Name cannot be blank.",
            "email": "Email Address cannot be blank.",
            "position": "Job Position cannot be blank.",
        }

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({**VALID, "email": "not-an-email"})
        assert exc_info.value.fields == {"email": "Please enter a valid email address."}

    def test_name_too_short(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({**VALID, "name": "J"})
        assert exc_info.value.fields == {"name": "Name must be at least 2 characters."}

    def test_too_long(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({**VALID, "position": "x" * 101})
        assert exc_info.value.fields == {"position": "Job Position should contain at most 100 characters."}

    @pytest.mark.parametrize(
        "salary, message",
        [
            ("abc", "Monthly Salary must be a number."),
            ("-1", "Monthly Salary must be no less than 0."),
            ("1000000", "Monthly Salary must be no greater than 999999.99."),
        ],
    )
    def test_salary_rules(self, salary: str, message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({**VALID, "salary": salary})
        assert exc_info.value.fields == {"salary": message}

    def test_salary_bounds_inclusive(self) -> None:
        assert EmployeeRules().clean({**VALID, "salary": "0"})["salary"] == Decimal("0")
        assert EmployeeRules().clean({**VALID, "salary": 999999.99})["salary"] == Decimal("999999.99")

    def test_all_errors_reported_together(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            EmployeeRules().clean({"name": "J", "email": "bad", "position": "", "salary": "x"})
        assert set(exc_info.value.fields) == {"name", "email", "position", "salary"}
        assert exc_info.value.message == "Employee data is invalid"


class TestEmployeeSchema:
    def test_declaration_order(self) -> None:
        assert EMPLOYEE_SCHEMA.names == (
            "id", "name", "email", "position", "salary", "salary_min", "salary_max",
            "created_from", "created_to", "created_at", "updated_at", "position_exact",
        )

    def test_sortable(self) -> None:
        assert SORTABLE_ATTRIBUTES == ("id", "name", "email", "position", "salary", "created_at", "updated_at")
        assert not EMPLOYEE_SCHEMA.is_sortable("salary_min")

    def test_labels_used_in_errors(self) -> None:
        result = QueryFilterBuilder(EMPLOYEE_SCHEMA).build({"salary": "abc", "id": "x", "salary_min": "?"})
        assert dict(result.errors) == {
            "id": "Employee ID must be an integer.",
            "salary": "Monthly Salary must be a number.",
            "salary_min": "Minimum Salary must be a number.",
        }

    def test_full_search_form(self) -> None:
        result = QueryFilterBuilder(EMPLOYEE_SCHEMA).build(
            {
                "position_exact": "Engineer",
                "created_to": "2024-06-30",
                "name": "jan",
                "salary_min": "50000",
                "created_from": "2024-01-01",
            }
        )
        assert result.descriptor.as_tuples() == [
            ("name", "contains-case-insensitive", "jan"),
            ("salary", ">=", Decimal("50000")),
            ("created_at", ">=", "2024-01-01 00:00:00"),
            ("created_at", "<=", "2024-06-30 23:59:59"),
            ("position", "=", "Engineer"),
        ]
