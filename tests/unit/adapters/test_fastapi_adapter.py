"""Unit / integration tests for the FastAPI adapter."""
from __future__ import annotations

import csv
import io
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from staff_admin.adapters.fastapi import (
    FastAPICorrelationIdMiddleware,
    FastAPIExceptionMapper,
    FastAPIHealthRouter,
    create_app,
)
from staff_admin.config import StaffAdminSettings
from staff_admin.kernel.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from staff_admin.observability.logging import current_correlation_id

STAFF = [
    {"name": "jan kowalski", "email": "jan@example.com", "position": "Engineer", "salary": 85000},
    {"name": "anna nowak", "email": "anna@example.com", "position": "Senior Engineer", "salary": "120000"},
    {"name": "piotr zielinski", "email": "piotr@example.com", "position": "Manager", "salary": 60000.5},
    {"name": "ewa lis", "email": "ewa@example.com", "position": "Engineer"},
]


@pytest.fixture()
def client(tmp_path: Path) -> Iterator[TestClient]:
    settings = StaffAdminSettings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        max_page_size=20,
    )
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def _seed(client: TestClient) -> list[int]:
    ids = []
    for data in STAFF:
        resp = client.post("/employees", json=data)
        assert resp.status_code == 201, resp.text
        ids.append(resp.json()["employee"]["id"])
    return ids


# ---------------------------------------------------------------------------
# Correlation ID middleware
# ---------------------------------------------------------------------------


class TestFastAPICorrelationIdMiddleware:
    def _app(self) -> FastAPI:
        app = FastAPI()
        app.add_middleware(FastAPICorrelationIdMiddleware)

        @app.get("/ping")
        async def ping() -> dict[str, Any]:
            return {"correlation_id": current_correlation_id()}

        return app

    def test_generated_correlation_id_returned_in_header(self) -> None:
        resp = TestClient(self._app()).get("/ping")
        assert resp.status_code == 200
        assert re.fullmatch(r"[0-9a-f-]{36}", resp.headers["x-correlation-id"])

    def test_client_supplied_id_echoed_back(self) -> None:
        resp = TestClient(self._app()).get("/ping", headers={"X-Correlation-ID": "my-req-123"})
        assert resp.headers["x-correlation-id"] == "my-req-123"
        assert resp.json() == {"correlation_id": "my-req-123"}

    def test_fallback_to_x_request_id(self) -> None:
        resp = TestClient(self._app()).get("/ping", headers={"X-Request-ID": "req-fallback"})
        assert resp.headers["x-correlation-id"] == "req-fallback"

    def test_traceparent_extraction(self) -> None:
        traceparent = "00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01"
        resp = TestClient(self._app()).get("/ping", headers={"traceparent": traceparent})
        assert resp.headers["x-correlation-id"] == "4bf92f3577b34da6a3ce929d0e0e4736"


# ---------------------------------------------------------------------------
# Exception mapper
# ---------------------------------------------------------------------------


class TestFastAPIExceptionMapper:
    @pytest.mark.parametrize(
        "exc, status",
        [
            (ValidationError("bad"), 400),
            (NotFoundError("Employee", 1), 404),
            (ConflictError("dup"), 409),
            (DomainError("rule"), 422),
            (PersistenceError("db down"), 503),
            (RuntimeError("other"), 500),
        ],
    )
    def test_status_for(self, exc: Exception, status: int) -> None:
        assert FastAPIExceptionMapper().status_for(exc) == status

    def test_body_carries_correlation_id(self) -> None:
        app = FastAPI()
        app.add_middleware(FastAPICorrelationIdMiddleware)
        FastAPIExceptionMapper().register(app)

        @app.get("/conflict")
        async def conflict() -> None:
            raise ConflictError("dup", cause=RuntimeError("driver"))

        resp = TestClient(app).get("/conflict", headers={"X-Correlation-ID": "cid-9"})
        assert resp.status_code == 409
        body = resp.json()
        assert body["code"] == "conflict"
        assert body["correlation_id"] == "cid-9"
        assert "cause" not in body


# ---------------------------------------------------------------------------
# Health router
# ---------------------------------------------------------------------------


class TestFastAPIHealthRouter:
    def _client(self, **checks: Any) -> TestClient:
        app = FastAPI()
        app.include_router(FastAPIHealthRouter(readiness_checks=checks))
        return TestClient(app)

    def test_live(self) -> None:
        assert self._client().get("/health/live").json() == {"status": "ok"}

    def test_ready_all_ok(self) -> None:
        async def ok() -> bool:
            return True

        resp = self._client(database=ok).get("/health/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "checks": {"database": True}}

    def test_ready_failing_check(self) -> None:
        async def broken() -> bool:
            raise ConnectionError("down")

        resp = self._client(database=broken).get("/health/ready")
        assert resp.status_code == 503
        assert resp.json()["checks"] == {"database": False}

    def test_app_readiness_pings_database(self, client: TestClient) -> None:
        resp = client.get("/health/ready")
        assert resp.status_code == 200
        assert resp.json()["checks"] == {"database": True}


# ---------------------------------------------------------------------------
# Employee endpoints
# ---------------------------------------------------------------------------


class TestEmployeeWrites:
    def test_create(self, client: TestClient) -> None:
        resp = client.post("/employees", json=STAFF[0])
        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Employee created successfully!"
        employee = body["employee"]
        assert employee["name"] == "Jan Kowalski"
        assert Decimal(employee["salary"]) == Decimal("85000")
        assert employee["formatted_salary"] == "$85,000.00"
        assert employee["initials"] == "JK"
        assert employee["is_high_earner"] is True

    def test_create_invalid(self, client: TestClient) -> None:
        resp = client.post("/employees", json={"name": "J", "email": "nope", "position": "", "salary": "abc"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["code"] == "validation_error"
        fields = {e["field"]: e["message"] for e in body["errors"]}
        assert fields == {
            "name": "Name must be at least 2 characters.",
            "email": "Please enter a valid email address.",
            "position": "Job Position cannot be blank.",
            "salary": "Monthly Salary must be a number.",
        }
        assert body["correlation_id"]

    def test_create_duplicate_email(self, client: TestClient) -> None:
        _seed(client)
        resp = client.post("/employees", json={**STAFF[1], "email": "JAN@example.com"})
        assert resp.status_code == 400
        assert resp.json()["errors"] == [{"field": "email", "message": "This email address is already registered."}]

    def test_update(self, client: TestClient) -> None:
        ids = _seed(client)
        resp = client.put(f"/employees/{ids[0]}", json={**STAFF[0], "position": "Lead Engineer"})
        assert resp.status_code == 200
        assert resp.json()["message"] == "Employee updated successfully!"
        assert client.get(f"/employees/{ids[0]}").json()["position"] == "Lead Engineer"

    def test_update_missing(self, client: TestClient) -> None:
        resp = client.put("/employees/999", json=STAFF[0])
        assert resp.status_code == 404
        assert resp.json()["message"] == "The requested employee does not exist."

    def test_delete(self, client: TestClient) -> None:
        ids = _seed(client)
        resp = client.delete(f"/employees/{ids[0]}")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Employee deleted successfully!"
        assert client.get(f"/employees/{ids[0]}").status_code == 404

    def test_batch_delete(self, client: TestClient) -> None:
        ids = _seed(client)
        resp = client.post("/employees/batch-delete", json={"ids": [ids[0], ids[1], 999]})
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "message": "2 employee(s) deleted successfully!",
            "employee": None,
            "count": 2,
        }
        assert client.get("/employees").json()["total"] == 2

    def test_batch_delete_empty(self, client: TestClient) -> None:
        resp = client.post("/employees/batch-delete", json={"ids": []})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["message"] == "Select at least one employee."


class TestEmployeeReads:
    def test_get_missing(self, client: TestClient) -> None:
        resp = client.get("/employees/42")
        assert resp.status_code == 404
        assert resp.json()["code"] == "not_found"

    def test_list_defaults(self, client: TestClient) -> None:
        ids = _seed(client)
        body = client.get("/employees").json()
        assert [e["id"] for e in body["items"]] == sorted(ids, reverse=True)
        assert body["sort"] == "-id"
        assert body["per_page"] == 10
        assert body["errors"] == {}

    def test_list_filters_and_sort(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees", params={"position": "engineer", "sort": "name"}).json()
        assert [e["name"] for e in body["items"]] == ["Anna Nowak", "Ewa Lis", "Jan Kowalski"]
        assert body["sort"] == "name"

    def test_list_salary_range(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees", params={"salary_min": "60000", "salary_max": "90000", "sort": "-salary"}).json()
        assert [e["name"] for e in body["items"]] == ["Jan Kowalski", "Piotr Zielinski"]

    def test_list_invalid_input_unfiltered_with_errors(self, client: TestClient) -> None:
        _seed(client)
        resp = client.get("/employees", params={"salary": "abc", "name": "jan"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["errors"] == {"salary": "Monthly Salary must be a number."}
        assert body["total"] == 4

    def test_list_oversized_id_is_a_field_error(self, client: TestClient) -> None:
        _seed(client)
        resp = client.get("/employees", params={"id": "99999999999999999999"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["errors"] == {"id": "Employee ID must be an integer."}
        assert body["total"] == 4

    def test_list_unsupported_sort_falls_back(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees", params={"sort": "password"}).json()
        assert body["sort"] == "-id"

    def test_list_pagination_clamped(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees", params={"per_page": 500, "page": 1}).json()
        assert body["per_page"] == 20
        body = client.get("/employees", params={"per_page": 3, "page": 2}).json()
        assert len(body["items"]) == 1
        assert body["has_previous"] is True
        assert body["has_next"] is False

    def test_list_rejects_bad_page(self, client: TestClient) -> None:
        assert client.get("/employees", params={"page": 0}).status_code == 422

    def test_high_earners(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees/high-earners").json()
        assert [e["name"] for e in body["items"]] == ["Anna Nowak", "Jan Kowalski"]
        body = client.get("/employees/high-earners", params={"threshold": "50000"}).json()
        assert body["total"] == 3

    def test_by_position(self, client: TestClient) -> None:
        _seed(client)
        body = client.get("/employees/by-position/Engineer").json()
        assert [e["name"] for e in body["items"]] == ["Ewa Lis", "Jan Kowalski"]

    def test_statistics(self, client: TestClient) -> None:
        _seed(client)
        stats = client.get("/employees/statistics").json()
        assert stats["total_employees"] == 4
        assert stats["highest_salary"] == pytest.approx(120000)
        assert stats["lowest_salary"] == pytest.approx(60000.5)

    def test_export(self, client: TestClient) -> None:
        _seed(client)
        resp = client.get("/employees/export", params={"position": "engineer", "sort": "name"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        disposition = resp.headers["content-disposition"]
        assert re.fullmatch(r'attachment; filename="employees_\d{8}_\d{6}\.csv"', disposition)
        rows = list(csv.reader(io.StringIO(resp.content.decode("utf-8"))))
        assert rows[0] == ["ID", "Name", "Email", "Position", "Salary", "Created At", "Updated At"]
        assert [r[1] for r in rows[1:]] == ["Anna Nowak", "Ewa Lis", "Jan Kowalski"]

    def test_correlation_header_on_app(self, client: TestClient) -> None:
        resp = client.get("/employees", headers={"X-Correlation-ID": "abc"})
        assert resp.headers["x-correlation-id"] == "abc"
