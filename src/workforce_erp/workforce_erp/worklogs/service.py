from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_negative_int
from ..core.enums import ApprovalStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .factory import MinutesStrategyFactory
from .model import OutputDetail, WorkLogDetail, WorkLogEntry
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


class WorkLogService:
    def __init__(
        self,
        work_logs: WorkLogRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: MinutesStrategyFactory | None = None,
    ):
        self._work_logs = work_logs
        self._employees = employees
        self._factory = strategy_factory or MinutesStrategyFactory()

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def _get_log(self, log_id: int) -> WorkLogEntry:
        entry = self._work_logs.get_by_id(int(log_id))
        if not entry:
            raise NotFoundError(f"Work log {log_id} not found")
        return entry

    def _minutes_for(self, employee: Employee, detail: WorkLogDetail) -> int:
        strategy = self._factory.for_employment(employee.employment_type)
        if not strategy.accepts(detail):
            raise ValidationError(f"Work detail does not match employment type {employee.employment_type.value}")
        if isinstance(detail, OutputDetail):
            for field_name in ("departures", "stayovers", "extra_beds", "extra_minutes"):
                require_non_negative_int(getattr(detail, field_name), field_name)
        return strategy.total_minutes(detail)

    def submit(self, *, employee_id: str, work_date: date, detail: WorkLogDetail) -> WorkLogEntry:
        employee = self._get_employee(employee_id)
        minutes = self._minutes_for(employee, detail)

        log_id = self._work_logs.add(
            employee_id=employee.employee_id,
            work_date=work_date,
            total_minutes=minutes,
            status=ApprovalStatus.PENDING,
            detail=detail,
        )
        logger.info("Work log %s submitted for %s on %s (%s min)", log_id, employee.employee_id, work_date, minutes)
        return self._get_log(log_id)

    def edit(self, *, log_id: int, detail: WorkLogDetail, work_date: Optional[date] = None) -> WorkLogEntry:
        entry = self._get_log(log_id)
        if entry.status != ApprovalStatus.PENDING:
            raise ValidationError("Only pending work logs can be edited")

        employee = self._get_employee(entry.employee_id)
        updated = replace(
            entry,
            work_date=work_date or entry.work_date,
            total_minutes=self._minutes_for(employee, detail),
            detail=detail,
        )
        if not self._work_logs.save(updated):
            raise ValidationError("Updating work log failed")
        return updated

    def _decide(self, log_id: int, status: ApprovalStatus, *, override: bool) -> WorkLogEntry:
        entry = self._get_log(log_id)
        if entry.status != ApprovalStatus.PENDING and not override:
            raise ValidationError("Work log was already decided")

        updated = replace(entry, status=status)
        if not self._work_logs.save(updated):
            raise ValidationError("Updating work log failed")
        logger.info("Work log %s: %s -> %s", entry.log_id, entry.status.value, status.value)
        return updated

    def approve(self, *, log_id: int, override: bool = False) -> WorkLogEntry:
        return self._decide(log_id, ApprovalStatus.APPROVED, override=override)

    def reject(self, *, log_id: int, override: bool = False) -> WorkLogEntry:
        return self._decide(log_id, ApprovalStatus.REJECTED, override=override)

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[WorkLogEntry]:
        rows = list(self._work_logs.list_for_employee(str(employee_id), start_date=start, end_date=end))
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return rows
