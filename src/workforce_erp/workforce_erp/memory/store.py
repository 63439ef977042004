from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..announcements.model import Announcement
from ..core.enums import ApprovalStatus, VehicleStatus, WorksiteKind
from ..employees.model import Employee
from ..finance.model import House, MiscExpense, Revenue
from ..fleet.model import Vehicle
from ..leave.model import LeaveRequest
from ..payroll.model import PayrollAdjustments
from ..worklogs.model import WorkLogDetail, WorkLogEntry
from ..worksites.model import PlanningEntry, Worksite


@dataclass
class InMemoryStore:
    """Process-local storage shared by the in-memory repositories.

    One store instance is one consistent data set; repositories built on the
    same store see each other's writes.
    """

    employees: dict[str, Employee] = field(default_factory=dict)
    work_logs: dict[int, WorkLogEntry] = field(default_factory=dict)
    adjustments: dict[str, dict[str, PayrollAdjustments]] = field(default_factory=dict)
    houses: dict[int, House] = field(default_factory=dict)
    revenue: dict[str, Revenue] = field(default_factory=dict)
    expenses: dict[str, MiscExpense] = field(default_factory=dict)
    leave_requests: dict[int, LeaveRequest] = field(default_factory=dict)
    vehicles: dict[int, Vehicle] = field(default_factory=dict)
    worksites: dict[int, Worksite] = field(default_factory=dict)
    planning: dict[tuple[date, str], PlanningEntry] = field(default_factory=dict)
    announcements: dict[str, Announcement] = field(default_factory=dict)
    _sequences: dict[str, int] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def next_id(self, table: str) -> int:
        """Next integer key for ``table`` (the name of one of the dicts above)."""
        with self._lock:
            current = max(self._sequences.get(table, 0), max(getattr(self, table), default=0))
            self._sequences[table] = current + 1
            return current + 1


class InMemoryEmployeeRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return list(self._store.employees.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._store.employees.get(employee_id)

    def add(self, employee: Employee) -> str:
        self._store.employees[employee.employee_id] = employee
        return employee.employee_id

    def save(self, employee: Employee) -> bool:
        if employee.employee_id not in self._store.employees:
            return False
        self._store.employees[employee.employee_id] = employee
        return True


class InMemoryWorkLogRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[WorkLogEntry]:
        return list(self._store.work_logs.values())

    def get_by_id(self, log_id: int) -> Optional[WorkLogEntry]:
        return self._store.work_logs.get(int(log_id))

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[WorkLogEntry]:
        items = [r for r in self._store.work_logs.values() if r.employee_id == employee_id]
        if start_date is not None:
            items = [r for r in items if r.work_date >= start_date]
        if end_date is not None:
            items = [r for r in items if r.work_date <= end_date]
        return items

    def add(
        self,
        *,
        employee_id: str,
        work_date: date,
        total_minutes: int,
        status: ApprovalStatus,
        detail: WorkLogDetail,
    ) -> int:
        log_id = self._store.next_id("work_logs")
        self._store.work_logs[log_id] = WorkLogEntry(
            log_id=log_id,
            employee_id=employee_id,
            work_date=work_date,
            total_minutes=int(total_minutes),
            status=status,
            detail=detail,
        )
        return log_id

    def save(self, entry: WorkLogEntry) -> bool:
        if entry.log_id not in self._store.work_logs:
            return False
        self._store.work_logs[entry.log_id] = entry
        return True


class InMemoryPayrollAdjustmentRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_for_month(self, month_key: str) -> dict[str, PayrollAdjustments]:
        return dict(self._store.adjustments.get(month_key, {}))

    def save(self, month_key: str, employee_id: str, adjustments: PayrollAdjustments) -> None:
        self._store.adjustments.setdefault(month_key, {})[employee_id] = adjustments


class InMemoryFinanceRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_houses(self) -> Sequence[House]:
        return list(self._store.houses.values())

    def get_house(self, house_id: int) -> Optional[House]:
        return self._store.houses.get(int(house_id))

    def add_house(self, *, name: str, address: str, rent: Decimal) -> int:
        house_id = self._store.next_id("houses")
        self._store.houses[house_id] = House(house_id=house_id, name=name, address=address, rent=rent)
        return house_id

    def save_house(self, house: House) -> None:
        self._store.houses[house.house_id] = house

    def delete_house(self, house_id: int) -> bool:
        return self._store.houses.pop(int(house_id), None) is not None

    def list_revenue(self) -> Sequence[Revenue]:
        return list(self._store.revenue.values())

    def get_revenue(self, revenue_id: str) -> Optional[Revenue]:
        return self._store.revenue.get(revenue_id)

    def save_revenue(self, revenue: Revenue) -> None:
        self._store.revenue[revenue.revenue_id] = revenue

    def list_expenses(self) -> Sequence[MiscExpense]:
        return list(self._store.expenses.values())

    def get_expense(self, expense_id: str) -> Optional[MiscExpense]:
        return self._store.expenses.get(expense_id)

    def save_expense(self, expense: MiscExpense) -> None:
        self._store.expenses[expense.expense_id] = expense


class InMemoryLeaveRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, *, employee_id: str, start_date: date, end_date: date, days_requested: int, reason: str) -> int:
        request_id = self._store.next_id("leave_requests")
        self._store.leave_requests[request_id] = LeaveRequest(
            request_id=request_id,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            days_requested=int(days_requested),
            status=ApprovalStatus.PENDING,
            reason=reason,
            created_at=datetime.now(),
        )
        return request_id

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        return self._store.leave_requests.get(int(request_id))

    def decide(self, *, request_id: int, status: ApprovalStatus) -> bool:
        req = self._store.leave_requests.get(int(request_id))
        if not req or req.status != ApprovalStatus.PENDING:
            return False
        self._store.leave_requests[req.request_id] = LeaveRequest(
            request_id=req.request_id,
            employee_id=req.employee_id,
            start_date=req.start_date,
            end_date=req.end_date,
            days_requested=req.days_requested,
            status=status,
            reason=req.reason,
            created_at=req.created_at,
        )
        return True

    def list(
        self,
        *,
        status: Optional[ApprovalStatus] = None,
        employee_id: Optional[str] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        items = list(self._store.leave_requests.values())
        if status is not None:
            items = [r for r in items if r.status == status]
        if employee_id is not None:
            items = [r for r in items if r.employee_id == employee_id]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items[: int(limit)]


class InMemoryVehicleRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Vehicle]:
        return list(self._store.vehicles.values())

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._store.vehicles.get(int(vehicle_id))

    def add(
        self,
        *,
        name: str,
        plate: str,
        insurance_due: date,
        inspection_due: date,
        status: VehicleStatus,
    ) -> int:
        vehicle_id = self._store.next_id("vehicles")
        self._store.vehicles[vehicle_id] = Vehicle(
            vehicle_id=vehicle_id,
            name=name,
            plate=plate,
            insurance_due=insurance_due,
            inspection_due=inspection_due,
            status=status,
        )
        return vehicle_id

    def save(self, vehicle: Vehicle) -> bool:
        if vehicle.vehicle_id not in self._store.vehicles:
            return False
        self._store.vehicles[vehicle.vehicle_id] = vehicle
        return True

    def delete(self, vehicle_id: int) -> bool:
        return self._store.vehicles.pop(int(vehicle_id), None) is not None


class InMemoryWorksiteRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Worksite]:
        return list(self._store.worksites.values())

    def get_by_id(self, worksite_id: int) -> Optional[Worksite]:
        return self._store.worksites.get(int(worksite_id))

    def add(self, *, name: str, address: str, kind: WorksiteKind) -> int:
        worksite_id = self._store.next_id("worksites")
        self._store.worksites[worksite_id] = Worksite(worksite_id=worksite_id, name=name, address=address, kind=kind)
        return worksite_id

    def save(self, worksite: Worksite) -> bool:
        if worksite.worksite_id not in self._store.worksites:
            return False
        self._store.worksites[worksite.worksite_id] = worksite
        return True


class InMemoryPlanningRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_range(self, start_date: date, end_date: date) -> Sequence[PlanningEntry]:
        return [e for e in self._store.planning.values() if start_date <= e.work_date <= end_date]

    def upsert(self, entry: PlanningEntry) -> None:
        self._store.planning[(entry.work_date, entry.employee_id)] = entry

    def remove(self, work_date: date, employee_id: str) -> bool:
        return self._store.planning.pop((work_date, employee_id), None) is not None

    def remove_worksite(self, worksite_id: int) -> int:
        keys = [k for k, e in self._store.planning.items() if e.worksite_id == worksite_id]
        for key in keys:
            del self._store.planning[key]
        return len(keys)


class InMemoryAnnouncementRepository:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Announcement]:
        return list(self._store.announcements.values())

    def get_by_id(self, announcement_id: str) -> Optional[Announcement]:
        return self._store.announcements.get(announcement_id)

    def save(self, announcement: Announcement) -> None:
        self._store.announcements[announcement.announcement_id] = announcement

    def delete(self, announcement_id: str) -> bool:
        return self._store.announcements.pop(announcement_id, None) is not None
