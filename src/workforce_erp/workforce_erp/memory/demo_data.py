from __future__ import annotations

import logging
from datetime import date, time
from decimal import Decimal

from ..announcements.model import Announcement
from ..core.enums import (
    ApprovalStatus,
    EmploymentType,
    ExpenseStatus,
    Priority,
    RevenueStatus,
    Role,
    VehicleStatus,
    WorksiteKind,
)
from ..employees.model import Employee, RateRecord
from ..finance.model import House, MiscExpense, Revenue
from ..fleet.model import Vehicle
from ..worklogs.model import OutputDetail, TimeDetail, WorkLogEntry
from ..worksites.model import PlanningEntry, Worksite
from .store import InMemoryStore

logger = logging.getLogger(__name__)


def load_demo_data(store: InMemoryStore) -> InMemoryStore:
    """Fill ``store`` with a small July 2024 data set for local runs."""
    ana = Employee(
        employee_id="ana.silva",
        name="Ana Silva",
        email="ana.silva@example.com",
        role=Role.EMPLOYEE,
        employment_type=EmploymentType.BY_TIME,
        hourly_rates=(
            RateRecord(rate=Decimal("12.50"), effective_date=date(2023, 1, 1)),
            RateRecord(rate=Decimal("15.00"), effective_date=date(2024, 6, 1)),
        ),
        start_date=date(2023, 1, 15),
        phone="123456789",
        house_id=1,
    )
    joao = Employee(
        employee_id="joao.costa",
        name="João Costa",
        email="joao.costa@example.com",
        role=Role.EMPLOYEE,
        employment_type=EmploymentType.BY_PRODUCTION,
        hourly_rates=(RateRecord(rate=Decimal("15.00"), effective_date=date(2023, 1, 1)),),
        start_date=date(2023, 3, 1),
        phone="987654321",
        house_id=2,
    )
    admin = Employee(
        employee_id="admin",
        name="Admin",
        email="admin@example.com",
        role=Role.ADMIN,
        employment_type=EmploymentType.BY_TIME,
        hourly_rates=(),
        start_date=date(2023, 1, 1),
    )
    for employee in (admin, ana, joao):
        store.employees[employee.employee_id] = employee

    logs = [
        ("ana.silva", date(2024, 7, 2), 450, ApprovalStatus.APPROVED, TimeDetail(time(9, 0), time(17, 0))),
        ("ana.silva", date(2024, 7, 3), 480, ApprovalStatus.APPROVED, TimeDetail(time(8, 30), time(17, 0))),
        ("ana.silva", date(2024, 7, 7), 465, ApprovalStatus.PENDING, TimeDetail(time(9, 0), time(17, 15))),
        ("joao.costa", date(2024, 7, 2), 400, ApprovalStatus.APPROVED, OutputDetail(departures=10, stayovers=5)),
        ("joao.costa", date(2024, 7, 3), 400, ApprovalStatus.PENDING, OutputDetail(departures=8, stayovers=8)),
        ("joao.costa", date(2024, 7, 4), 410, ApprovalStatus.REJECTED, OutputDetail(departures=12, stayovers=2, extra_beds=2)),
    ]
    for employee_id, work_date, minutes, status, detail in logs:
        log_id = store.next_id("work_logs")
        store.work_logs[log_id] = WorkLogEntry(
            log_id=log_id,
            employee_id=employee_id,
            work_date=work_date,
            total_minutes=minutes,
            status=status,
            detail=detail,
        )

    store.houses[1] = House(house_id=1, name="House Deerlijk", address="Flower Street 1, Deerlijk", rent=Decimal("950"))
    store.houses[2] = House(house_id=2, name="House Gent", address="Central Square 2, Gent", rent=Decimal("1100"))

    store.revenue["REV001"] = Revenue(
        revenue_id="REV001",
        description="Hotel cleaning contract",
        client="Hotel Helios",
        date=date(2024, 7, 20),
        amount=Decimal("15000.00"),
        status=RevenueStatus.RECEIVED,
    )
    store.revenue["REV002"] = Revenue(
        revenue_id="REV002",
        description="Worksite support",
        client="Bruges site",
        date=date(2024, 7, 15),
        amount=Decimal("2000.00"),
    )
    store.expenses["EXP001"] = MiscExpense(
        expense_id="EXP001",
        description="Cleaning supplies",
        category="Supplies",
        date=date(2024, 7, 12),
        amount=Decimal("350.70"),
        status=ExpenseStatus.PAID,
    )
    store.expenses["EXP002"] = MiscExpense(
        expense_id="EXP002",
        description="Van maintenance",
        category="Fleet",
        date=date(2024, 7, 10),
        amount=Decimal("850.00"),
    )

    store.vehicles[1] = Vehicle(1, "Renault Master", "1-ABC-123", date(2025, 6, 30), date(2025, 7, 15), VehicleStatus.IN_USE)
    store.vehicles[2] = Vehicle(2, "VW Caddy", "1-XYZ-987", date(2024, 12, 1), date(2025, 2, 28), VehicleStatus.MAINTENANCE)

    store.worksites[1] = Worksite(1, "Hotel Helios", "Main Street 123, Gent", WorksiteKind.HOTEL)
    store.worksites[2] = Worksite(2, "Bruges site", "Builders Avenue 456, Bruges", WorksiteKind.CONSTRUCTION)
    store.worksites[3] = Worksite(3, "Head office", "Liberty Avenue 10, Brussels", WorksiteKind.OTHER, is_active=False)

    for entry in (
        PlanningEntry(date(2024, 7, 2), "ana.silva", 1),
        PlanningEntry(date(2024, 7, 2), "joao.costa", 2),
        PlanningEntry(date(2024, 7, 7), "joao.costa", None),
    ):
        store.planning[(entry.work_date, entry.employee_id)] = entry

    store.announcements["ANN001"] = Announcement(
        announcement_id="ANN001",
        title="Summer schedule",
        date=date(2024, 7, 1),
        content="From July on the Hotel Helios team starts at 8:00 on weekdays.",
        categories=("Planning", "General"),
        priority=Priority.HIGH,
    )

    logger.info("Loaded demo data: %s employees, %s work logs", len(store.employees), len(store.work_logs))
    return store
