"""FastAPI adapter – reusable dependency functions and OpenAPI helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import Depends, Query, Request

from staff_admin.application.employees import EmployeeService

# Query parameters that drive sorting and paging rather than filtering.
RESERVED_PARAMS = frozenset({"sort", "page", "per_page"})


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]


@dataclass(frozen=True)
class SearchParams:
    """Search-form input plus sort and paging, as read from the query string."""

    raw_input: dict[str, Any] = field(default_factory=dict)
    sort: str | None = None
    page: int = 1
    per_page: int | None = None


async def search_params(
    request: Request,
    sort: str | None = Query(default=None, description="Attribute to sort by; prefix with '-' for descending"),
    page: int = Query(default=1, ge=1, description="1-based page number"),
    per_page: int | None = Query(default=None, ge=1, description="Items per page"),
) -> SearchParams:
    """Every other query parameter is handed to the search form as-is."""
    raw_input = {k: v for k, v in request.query_params.items() if k not in RESERVED_PARAMS}
    return SearchParams(raw_input=raw_input, sort=sort, page=page, per_page=per_page)


SearchParamsDep = Annotated[SearchParams, Depends(search_params)]


_ERROR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "code": {"type": "string"},
        "message": {"type": "string"},
        "detail": {"type": "object"},
        "errors": {"type": "array", "items": {"type": "object"}},
        "correlation_id": {"type": "string", "nullable": True},
    },
    "required": ["code", "message"],
}

_STATUS_DESCRIPTIONS: dict[int, tuple[str, str]] = {
    400: ("validation_error", "Validation error"),
    404: ("not_found", "Resource not found"),
    409: ("conflict", "Conflict"),
    422: ("domain_error", "Domain rule violated"),
    503: ("infrastructure_error", "Service unavailable"),
}


def error_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    """Build a ``responses=`` mapping documenting the given error statuses."""
    result: dict[int | str, dict[str, Any]] = {}
    for status in codes:
        code, description = _STATUS_DESCRIPTIONS.get(status, ("error", "Error"))
        result[status] = {
            "description": description,
            "content": {
                "application/json": {
                    "schema": _ERROR_SCHEMA,
                    "example": {"code": code, "message": description, "correlation_id": None},
                }
            },
        }
    return result


__all__ = [
    "EmployeeServiceDep",
    "SearchParams",
    "SearchParamsDep",
    "error_responses",
    "get_employee_service",
    "search_params",
]
