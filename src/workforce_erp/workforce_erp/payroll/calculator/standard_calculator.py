from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Collection, Iterable, Optional

from ...core.constants import SUNDAY_BONUS_RATE
from ...core.enums import ApprovalStatus
from ...employees.model import Employee
from ...worklogs.model import WorkLogEntry
from ..aggregator import aggregate_work_logs
from ..model import PayrollAdjustments, PayrollResult
from ..rates import resolve_rate
from .base import PayrollCalculator

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = Decimal("60")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hours at the period-end rate plus a Sunday bonus.

    The rate in effect on the last day of the period applies to every hour
    of the period, including hours worked before a mid-period raise.
    """

    def compute(
        self,
        employee: Employee,
        work_logs: Iterable[WorkLogEntry],
        period_start: Any,
        period_end: Any,
        adjustments: Optional[PayrollAdjustments] = None,
        *,
        statuses: Optional[Collection[ApprovalStatus]] = None,
    ) -> PayrollResult:
        totals = aggregate_work_logs(work_logs, employee.employee_id, period_start, period_end, statuses=statuses)
        rate = resolve_rate(employee, period_end)

        base_amount = Decimal(totals.total_minutes) / MINUTES_PER_HOUR * rate
        bonus_amount = Decimal(totals.bonus_minutes) / MINUTES_PER_HOUR * rate * SUNDAY_BONUS_RATE

        extra = Decimal("0")
        discount = Decimal("0")
        if adjustments is not None:
            extra = Decimal(adjustments.extra)
            discount = Decimal(adjustments.discount)

        logger.debug(
            "Payroll %s %s..%s: %s min (%s bonus) at %s",
            employee.employee_id, period_start, period_end, totals.total_minutes, totals.bonus_minutes, rate,
        )
        return PayrollResult(
            base_amount=base_amount,
            bonus_amount=bonus_amount,
            total_amount=base_amount + bonus_amount + extra - discount,
            total_minutes=totals.total_minutes,
            bonus_minutes=totals.bonus_minutes,
            hourly_rate=rate,
            extra=extra,
            discount=discount,
        )


_default_calculator = StandardPayrollCalculator()


def compute_payroll(
    employee: Employee,
    work_logs: Iterable[WorkLogEntry],
    period_start: Any,
    period_end: Any,
    adjustments: Optional[PayrollAdjustments] = None,
    *,
    statuses: Optional[Collection[ApprovalStatus]] = None,
) -> PayrollResult:
    return _default_calculator.compute(
        employee, work_logs, period_start, period_end, adjustments, statuses=statuses
    )
