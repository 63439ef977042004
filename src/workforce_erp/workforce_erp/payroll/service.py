from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import month_bounds, month_key
from ..common.validators import require_non_negative
from ..core.constants import ANY_STATUS, APPROVED_ONLY
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..worklogs.repository import WorkLogRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollAdjustments, PayrollLine, PayrollSheet
from .repository import PayrollAdjustmentRepository

logger = logging.getLogger(__name__)


def format_minutes(minutes: Optional[int]) -> str:
    if minutes is None or minutes < 0:
        return "0h 0m"
    return f"{int(minutes) // 60}h {int(minutes) % 60}m"


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        work_logs: WorkLogRepository,
        adjustments: PayrollAdjustmentRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._work_logs = work_logs
        self._adjustments = adjustments
        self._calculator = calculator or StandardPayrollCalculator()

    def _payroll_employees(self) -> list[Employee]:
        staff = [e for e in self._employees.list_all() if e.role == Role.EMPLOYEE]
        staff.sort(key=lambda e: e.name.lower())
        return staff

    def _line(
        self,
        employee: Employee,
        logs,
        start: date,
        end: date,
        adjustments: Optional[PayrollAdjustments],
        statuses,
    ) -> PayrollLine:
        result = self._calculator.compute(employee, logs, start, end, adjustments, statuses=statuses)
        return PayrollLine(
            employee_id=employee.employee_id,
            name=employee.name,
            employment_type=employee.employment_type.value,
            result=result,
        )

    def monthly_payroll(self, *, year: int, month: int) -> PayrollSheet:
        """Payroll sheet of a calendar month: every status, manual adjustments applied."""
        start, end = month_bounds(year, month)
        logs = list(self._work_logs.list_all())
        month_adjustments: Mapping[str, PayrollAdjustments] = self._adjustments.get_for_month(month_key(year, month))

        lines = [
            self._line(e, logs, start, end, month_adjustments.get(e.employee_id, PayrollAdjustments()), ANY_STATUS)
            for e in self._payroll_employees()
        ]
        return PayrollSheet(period_start=start, period_end=end, lines=lines)

    def period_report(self, *, start: date, end: date) -> PayrollSheet:
        """Formal report: approved work only, employees without hours left out."""
        if end < start:
            raise ValidationError("End date must be on or after start date")

        logs = list(self._work_logs.list_all())
        lines = [self._line(e, logs, start, end, None, APPROVED_ONLY) for e in self._payroll_employees()]
        lines = [line for line in lines if line.result.total_minutes > 0]
        lines.sort(key=lambda line: line.result.total_minutes, reverse=True)
        return PayrollSheet(period_start=start, period_end=end, lines=lines)

    def employee_summary(self, *, employee_id: str, year: int, month: int) -> PayrollLine:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        start, end = month_bounds(year, month)
        logs = self._work_logs.list_for_employee(employee.employee_id, start_date=start, end_date=end)
        adjustments = self._adjustments.get_for_month(month_key(year, month)).get(employee.employee_id)
        return self._line(employee, logs, start, end, adjustments, ANY_STATUS)

    def set_adjustment(
        self,
        *,
        year: int,
        month: int,
        employee_id: str,
        extra: Any = None,
        discount: Any = None,
    ) -> PayrollAdjustments:
        if not self._employees.get_by_id(str(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")

        key = month_key(year, month)
        current = self._adjustments.get_for_month(key).get(str(employee_id), PayrollAdjustments())
        if extra is not None:
            current = replace(current, extra=require_non_negative(extra, "Extra"))
        if discount is not None:
            current = replace(current, discount=require_non_negative(discount, "Discount"))

        self._adjustments.save(key, str(employee_id), current)
        logger.info("Payroll adjustment %s for %s: extra=%s discount=%s", key, employee_id, current.extra, current.discount)
        return current
