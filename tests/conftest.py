from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus, EmploymentType, Role
from src.workforce_erp.workforce_erp.employees.model import Employee, RateRecord
from src.workforce_erp.workforce_erp.memory.store import InMemoryStore
from src.workforce_erp.workforce_erp.worklogs.model import OutputDetail, TimeDetail, WorkLogEntry


def make_employee(
    employee_id: str = "e1",
    *rates: tuple[str, date],
    name: str = "Ana Silva",
    role: Role = Role.EMPLOYEE,
    employment_type: EmploymentType = EmploymentType.BY_TIME,
) -> Employee:
    return Employee(
        employee_id=employee_id,
        name=name,
        email=f"{employee_id}@example.com",
        role=role,
        employment_type=employment_type,
        hourly_rates=tuple(RateRecord(rate=Decimal(r), effective_date=d) for r, d in rates),
        start_date=date(2023, 1, 1),
    )


def make_log(
    log_id: int,
    employee_id: str,
    work_date: date,
    minutes: int,
    status: ApprovalStatus = ApprovalStatus.APPROVED,
) -> WorkLogEntry:
    return WorkLogEntry(
        log_id=log_id,
        employee_id=employee_id,
        work_date=work_date,
        total_minutes=minutes,
        status=status,
        detail=TimeDetail(start=time(9, 0), end=time(17, 0)),
    )


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def log_factory():
    return make_log


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def staffed_store(store) -> InMemoryStore:
    """Two employees and one admin with a handful of June 2024 logs."""
    ana = make_employee("ana", ("12.50", date(2023, 1, 1)), ("15.00", date(2024, 6, 1)), name="Ana Silva")
    joao = make_employee(
        "joao",
        ("15.00", date(2023, 1, 1)),
        name="Joao Costa",
        employment_type=EmploymentType.BY_PRODUCTION,
    )
    admin = make_employee("admin", name="Admin", role=Role.ADMIN)
    for e in (ana, joao, admin):
        store.employees[e.employee_id] = e

    store.work_logs[1] = make_log(1, "ana", date(2024, 6, 3), 480)
    store.work_logs[2] = make_log(2, "ana", date(2024, 6, 9), 240, ApprovalStatus.PENDING)  # Sunday
    store.work_logs[3] = WorkLogEntry(
        log_id=3,
        employee_id="joao",
        work_date=date(2024, 6, 4),
        total_minutes=400,
        status=ApprovalStatus.APPROVED,
        detail=OutputDetail(departures=10, stayovers=5),
    )
    return store
