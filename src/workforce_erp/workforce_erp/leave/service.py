from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import business_days_inclusive
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import ApprovalStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, requests: LeaveRepository, employees: EmployeeRepository):
        self._requests = requests
        self._employees = employees

    def create(self, *, employee_id: str, start_date: date, end_date: date, reason: str) -> int:
        if not self._employees.get_by_id(str(employee_id)):
            raise NotFoundError(f"Employee {employee_id} not found")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        reason = require_non_empty(reason, "Reason")
        request_id = self._requests.create(
            employee_id=str(employee_id),
            start_date=start_date,
            end_date=end_date,
            days_requested=business_days_inclusive(start_date, end_date),
            reason=reason,
        )
        logger.info("Leave request %s created for %s (%s..%s)", request_id, employee_id, start_date, end_date)
        return request_id

    def _decide(self, request_id: int, status: ApprovalStatus) -> LeaveRequest:
        req = self._requests.get(int(request_id))
        if not req:
            raise NotFoundError("Leave request not found")
        if req.status != ApprovalStatus.PENDING:
            raise ValidationError("Leave request was already decided")

        if not self._requests.decide(request_id=int(request_id), status=status):
            raise ValidationError("Deciding leave request failed")
        logger.info("Leave request %s -> %s", request_id, status.value)
        return self._requests.get(int(request_id))

    def approve(self, *, request_id: int) -> LeaveRequest:
        return self._decide(request_id, ApprovalStatus.APPROVED)

    def reject(self, *, request_id: int) -> LeaveRequest:
        return self._decide(request_id, ApprovalStatus.REJECTED)

    def list(
        self,
        *,
        status: Optional[ApprovalStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        return self._requests.list(status=status, employee_id=employee_id, limit=DEFAULT_PAGE_LIMIT)
