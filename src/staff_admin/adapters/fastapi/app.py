"""FastAPI adapter – application factory."""
from __future__ import annotations

import dataclasses
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from staff_admin import __version__
from staff_admin.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from staff_admin.adapters.fastapi.health import FastAPIHealthRouter
from staff_admin.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from staff_admin.adapters.fastapi.routers import FastAPIEmployeeRouter
from staff_admin.adapters.sqlalchemy import Base, SqlAlchemySessionFactory, SqlAlchemyUnitOfWork
from staff_admin.application.employees import EMPLOYEE_SCHEMA, EmployeeService
from staff_admin.application.export import CsvExporter
from staff_admin.application.search import QueryFilterBuilder
from staff_admin.config import StaffAdminSettings, load_settings
from staff_admin.observability.logging import JsonLoggerFactory, get_logger

_logger = get_logger(__name__)


def create_app(settings: StaffAdminSettings | None = None) -> FastAPI:
    """Wire settings, database, service and routers into a FastAPI app.

    Without *settings* they are read from ``STAFF_*`` variables and ``.env``.
    Usable with ``uvicorn --factory staff_admin.adapters.fastapi:create_app``.
    """
    settings = settings or load_settings()
    JsonLoggerFactory.configure(settings.log_level)

    sessions = SqlAlchemySessionFactory(settings.database_url, echo=settings.echo_sql)
    schema = dataclasses.replace(EMPLOYEE_SCHEMA, default_page_size=settings.default_page_size)
    service = EmployeeService(
        lambda: SqlAlchemyUnitOfWork(sessions),
        builder=QueryFilterBuilder(schema, max_page_size=settings.max_page_size),
        exporter=CsvExporter(bom=settings.csv_bom),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        if settings.create_schema:
            await sessions.create_schema(Base)
        _logger.info("app.started", version=__version__)
        try:
            yield
        finally:
            await sessions.dispose()
            _logger.info("app.stopped")

    app = FastAPI(title="Staff Admin", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.sessions = sessions
    app.state.employee_service = service

    app.add_middleware(FastAPICorrelationIdMiddleware)
    FastAPIExceptionMapper().register(app)
    app.include_router(FastAPIHealthRouter(readiness_checks={"database": sessions.ping}))
    app.include_router(FastAPIEmployeeRouter())
    return app


__all__ = ["create_app"]
