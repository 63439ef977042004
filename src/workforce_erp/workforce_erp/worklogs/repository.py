from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ApprovalStatus
from .model import WorkLogDetail, WorkLogEntry


class WorkLogRepository(Protocol):
    def list_all(self) -> Sequence[WorkLogEntry]:
        raise NotImplementedError

    def get_by_id(self, log_id: int) -> Optional[WorkLogEntry]:
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[WorkLogEntry]:
        raise NotImplementedError

    def add(
        self,
        *,
        employee_id: str,
        work_date: date,
        total_minutes: int,
        status: ApprovalStatus,
        detail: WorkLogDetail,
    ) -> int:
        raise NotImplementedError

    def save(self, entry: WorkLogEntry) -> bool:
        raise NotImplementedError
