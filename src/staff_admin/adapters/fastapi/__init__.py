"""FastAPI adapter – app factory, routers, middleware, exception mapper."""
from staff_admin.adapters.fastapi.app import create_app
from staff_admin.adapters.fastapi.deps import SearchParams, error_responses, get_employee_service
from staff_admin.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from staff_admin.adapters.fastapi.health import FastAPIHealthRouter
from staff_admin.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from staff_admin.adapters.fastapi.routers import FastAPIEmployeeRouter

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIEmployeeRouter",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "SearchParams",
    "create_app",
    "error_responses",
    "get_employee_service",
]
