"""FastAPI adapter – employee administration router."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Response

from staff_admin.adapters.fastapi.deps import (
    EmployeeServiceDep,
    SearchParamsDep,
    error_responses,
)
from staff_admin.adapters.fastapi.schemas import (
    ActionOut,
    BatchDeleteIn,
    EmployeeIn,
    EmployeeOut,
    EmployeePage,
)
from staff_admin.application.employees import HIGH_EARNER_THRESHOLD, ActionResult, SearchOutcome


def _page_body(outcome: SearchOutcome) -> EmployeePage:
    return EmployeePage(
        items=[EmployeeOut.model_validate(record) for record in outcome.page.items],
        sort=outcome.descriptor.sort.token,
        errors=dict(outcome.errors),
        **outcome.page.meta(),
    )


def _action_body(result: ActionResult) -> ActionOut:
    employee = EmployeeOut.model_validate(result.employee) if result.employee is not None else None
    return ActionOut(success=result.success, message=result.message, employee=employee, count=result.count)


def FastAPIEmployeeRouter(prefix: str = "/employees", tags: list[str] | None = None) -> APIRouter:
    """Return the employee administration router.

    Fixed paths (``/export``, ``/statistics`` ...) are declared before
    ``/{employee_id}`` so they are never captured as an id.
    """
    router = APIRouter(prefix=prefix, tags=tags or ["employees"])

    @router.get("", response_model=EmployeePage)
    async def list_employees(service: EmployeeServiceDep, params: SearchParamsDep) -> Any:
        outcome = await service.search(
            params.raw_input, sort=params.sort, page=params.page, page_size=params.per_page
        )
        return _page_body(outcome)

    @router.get("/export")
    async def export_employees(service: EmployeeServiceDep, params: SearchParamsDep) -> Response:
        export = await service.export_csv(params.raw_input, sort=params.sort)
        return Response(
            content=export.content,
            media_type=export.media_type,
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )

    @router.get("/statistics")
    async def employee_statistics(service: EmployeeServiceDep) -> dict[str, float | int]:
        return await service.statistics()

    @router.get("/high-earners", response_model=EmployeePage)
    async def high_earners(
        service: EmployeeServiceDep,
        threshold: str = Query(default=str(HIGH_EARNER_THRESHOLD)),
        page: int = Query(default=1, ge=1),
    ) -> Any:
        return _page_body(await service.search_high_earners(threshold, page=page))

    @router.get("/by-position/{position}", response_model=EmployeePage)
    async def by_position(
        service: EmployeeServiceDep,
        position: str,
        page: int = Query(default=1, ge=1),
    ) -> Any:
        return _page_body(await service.search_by_position(position, page=page))

    @router.post("/batch-delete", response_model=ActionOut, responses=error_responses(400, 503))
    async def batch_delete(service: EmployeeServiceDep, body: BatchDeleteIn) -> Any:
        return _action_body(await service.batch_delete(body.ids))

    @router.get("/{employee_id}", response_model=EmployeeOut, responses=error_responses(404))
    async def get_employee(service: EmployeeServiceDep, employee_id: int) -> Any:
        return EmployeeOut.model_validate(await service.get(employee_id))

    @router.post(
        "",
        status_code=201,
        response_model=ActionOut,
        responses=error_responses(400, 409, 503),
    )
    async def create_employee(service: EmployeeServiceDep, body: EmployeeIn) -> Any:
        return _action_body(await service.create(body.model_dump()))

    @router.put(
        "/{employee_id}",
        response_model=ActionOut,
        responses=error_responses(400, 404, 409, 503),
    )
    async def update_employee(service: EmployeeServiceDep, employee_id: int, body: EmployeeIn) -> Any:
        return _action_body(await service.update(employee_id, body.model_dump()))

    @router.delete("/{employee_id}", response_model=ActionOut, responses=error_responses(404, 503))
    async def delete_employee(service: EmployeeServiceDep, employee_id: int) -> Any:
        return _action_body(await service.delete(employee_id))

    return router


__all__ = ["FastAPIEmployeeRouter"]
