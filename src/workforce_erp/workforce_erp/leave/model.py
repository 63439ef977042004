from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    start_date: date
    end_date: date
    days_requested: int
    status: ApprovalStatus
    reason: str
    created_at: datetime
