from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ApprovalStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
        days_requested: int,
        reason: str,
    ) -> int:
        raise NotImplementedError

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def decide(self, *, request_id: int, status: ApprovalStatus) -> bool:
        """Set the final status; only succeeds for a PENDING request."""

        raise NotImplementedError

    def list(
        self,
        *,
        status: Optional[ApprovalStatus] = None,
        employee_id: Optional[str] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError
