from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Collection, Iterable, Optional

from ...core.enums import ApprovalStatus
from ...employees.model import Employee
from ...worklogs.model import WorkLogEntry
from ..model import PayrollAdjustments, PayrollResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
