from __future__ import annotations

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus
from src.workforce_erp.workforce_erp.main import create_app


@pytest.fixture
def client(monkeypatch, staffed_store):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container(store=staffed_store))
    return app.test_client()


def test_health(client):
    res = client.get("/api/health")

    assert res.status_code == 200
    assert res.get_json()["status"] == "ok"


def test_app_builds_its_own_container(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()

    res = app.test_client().get("/api/employees")
    assert res.status_code == 200
    assert res.get_json()["employees"] == []


def test_monthly_payroll_json(client):
    res = client.get("/api/payroll/monthly?year=2024&month=6")
    body = res.get_json()

    assert res.status_code == 200
    assert body["payroll"]["totals"]["total_amount"] == "340.00"
    ana = body["payroll"]["lines"][0]
    assert ana["employee_id"] == "ana"
    assert ana["hours"] == "12h 0m"
    assert ana["result"]["bonus_amount"] == "60.00"


def test_payroll_report_rejects_bad_dates(client):
    assert client.get("/api/payroll/report?start=2024-06-30&end=2024-06-01").status_code == 400
    assert client.get("/api/payroll/report?start=junk&end=2024-06-01").status_code == 400


def test_employee_payroll_unknown_is_404(client):
    res = client.get("/api/payroll/employees/ghost?year=2024&month=6")

    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_submit_and_approve_worklog(client):
    res = client.post(
        "/api/worklogs",
        json={"employee_id": "ana", "work_date": "2024-06-16", "detail": {"start": "08:00", "end": "12:00"}},
    )
    assert res.status_code == 201
    log = res.get_json()["work_log"]
    assert log["total_minutes"] == 240
    assert log["status"] == "PENDING"

    res = client.post(f"/api/worklogs/{log['log_id']}/approve")
    assert res.get_json()["work_log"]["status"] == "APPROVED"

    report = client.get("/api/payroll/report?start=2024-06-01&end=2024-06-30").get_json()["report"]
    ana = next(line for line in report["lines"] if line["employee_id"] == "ana")
    assert ana["result"]["bonus_minutes"] == 240


def test_adjustment_and_rate_endpoints(client):
    res = client.put("/api/payroll/adjustments?year=2024&month=6", json={"employee_id": "joao", "extra": "10"})
    assert res.get_json()["adjustments"] == {"extra": "10.00", "discount": "0.00"}

    res = client.post("/api/employees/joao/rates", json={"rate": "20", "effective_date": "2024-06-15"})
    assert res.status_code == 200

    line = client.get("/api/payroll/employees/joao?year=2024&month=6").get_json()["payroll"]
    assert line["result"]["hourly_rate"] == "20.00"
    assert line["result"]["total_amount"] == "143.33"


def test_leave_flow(client):
    res = client.post(
        "/api/leave",
        json={"employee_id": "ana", "start_date": "2024-06-10", "end_date": "2024-06-14", "reason": "Holiday"},
    )
    request_id = res.get_json()["request_id"]

    res = client.post(f"/api/leave/{request_id}/approve")
    assert res.get_json()["request"]["days_requested"] == 5

    assert client.post(f"/api/leave/{request_id}/reject").status_code == 400
    assert len(client.get("/api/leave?status=approved").get_json()["requests"]) == 1


def test_finance_endpoints(client):
    res = client.post(
        "/api/finance/revenue", json={"description": "Job", "client": "Hotel", "date": "2024-06-05", "amount": "500"}
    )
    assert res.status_code == 201

    summary = client.get("/api/finance/summary?year=2024&month=6").get_json()
    assert summary["summary"]["total_revenue"] == "500.00"
    assert summary["summary"]["balance"] == "160.00"
    assert summary["amount_receivable"] == "500.00"

    assert client.post("/api/finance/expenses", data="not json").status_code == 400


def test_adjustment_month_must_be_valid(client, staffed_store):
    res = client.put("/api/payroll/adjustments", json={"employee_id": "joao", "year": "abc", "month": 6, "extra": "1"})
    assert res.status_code == 400

    res = client.put("/api/payroll/adjustments", json={"employee_id": "joao", "year": 2024, "month": 13, "extra": "1"})
    assert res.status_code == 400
    assert staffed_store.adjustments == {}


def test_monthly_payroll_rejects_year_out_of_range(client):
    assert client.get("/api/payroll/monthly?year=0&month=1").status_code == 400
    assert client.get("/api/payroll/monthly?year=2024&month=0").status_code == 400
    assert client.get("/api/payroll/monthly?year=x&month=1").status_code == 400


def test_override_flag_must_be_a_boolean(client, staffed_store):
    res = client.post("/api/worklogs/1/reject", json={"override": "false"})

    assert res.status_code == 400
    assert staffed_store.work_logs[1].status == ApprovalStatus.APPROVED

    assert client.post("/api/worklogs/1/reject", json=[1]).status_code == 400
    assert client.post("/api/worklogs/1/reject", json={"override": False}).status_code == 400
    assert client.post("/api/worklogs/1/reject", json={"override": True}).status_code == 200


def test_house_lifecycle(client, staffed_store):
    res = client.post("/api/houses", json={"name": "Casa Azul", "address": "Rua Azul 5, Gent", "rent": "900"})
    assert res.status_code == 201
    house_id = res.get_json()["house"]["house_id"]

    res = client.post(
        "/api/employees",
        json={
            "name": "Maria",
            "email": "maria@example.com",
            "hourly_rate": "11",
            "start_date": "2024-06-01",
            "house_id": house_id,
        },
    )
    assert res.status_code == 201
    maria_id = res.get_json()["employee"]["employee_id"]

    res = client.put(f"/api/houses/{house_id}", json={"rent": "950"})
    assert res.get_json()["house"]["rent"] == "950.00"

    res = client.delete(f"/api/houses/{house_id}")
    assert res.get_json()["unassigned_employees"] == 1
    assert staffed_store.employees[maria_id].house_id is None
    assert client.get("/api/houses").get_json()["houses"] == []


def test_hire_with_unknown_house_is_rejected(client):
    res = client.post(
        "/api/employees",
        json={"name": "Maria", "email": "m@example.com", "hourly_rate": "11", "start_date": "2024-06-01", "house_id": 99},
    )

    assert res.status_code == 404


def test_fleet_worksite_and_announcement_routes(client):
    res = client.post(
        "/api/vehicles",
        json={"name": "Renault Master", "plate": "1-ABC-123", "insurance_due": "2025-06-30", "inspection_due": "2025-07-15"},
    )
    assert res.status_code == 201
    vehicle_id = res.get_json()["vehicle"]["vehicle_id"]
    res = client.put(f"/api/vehicles/{vehicle_id}", json={"status": "maintenance"})
    assert res.get_json()["vehicle"]["status"] == "MAINTENANCE"
    assert client.put(f"/api/vehicles/{vehicle_id}", json={"status": "flying"}).status_code == 400

    res = client.post("/api/worksites", json={"name": "Hotel Helios", "address": "Main Street 1", "kind": "hotel"})
    site_id = res.get_json()["worksite"]["worksite_id"]
    res = client.put("/api/planning", json={"work_date": "2024-06-10", "employee_id": "ana", "worksite_id": site_id})
    assert res.get_json()["entry"]["day_off"] is False
    res = client.put("/api/planning", json={"work_date": "2024-06-10", "employee_id": "joao", "worksite_id": None})
    assert res.get_json()["entry"]["day_off"] is True
    assert len(client.get("/api/planning?start=2024-06-10").get_json()["planning"]) == 2

    res = client.put(f"/api/worksites/{site_id}", json={"is_active": False})
    assert res.get_json()["worksite"]["is_active"] is False
    assert len(client.get("/api/planning?start=2024-06-10").get_json()["planning"]) == 1

    res = client.post(
        "/api/announcements",
        json={"title": "Summer schedule", "content": "Hotel team starts at eight.", "categories": ["Planning"]},
    )
    assert res.status_code == 201
    assert len(client.get("/api/announcements?category=planning").get_json()["announcements"]) == 1
    assert client.post("/api/announcements", json={"title": "Hi", "content": "short"}).status_code == 400


@pytest.mark.parametrize("departures", [2.7, True, "2.7"])
def test_output_counts_must_be_whole_numbers(client, staffed_store, departures):
    res = client.post(
        "/api/worklogs",
        json={"employee_id": "joao", "work_date": "2024-06-05", "detail": {"departures": departures}},
    )

    assert res.status_code == 400
    assert len(staffed_store.work_logs) == 3
