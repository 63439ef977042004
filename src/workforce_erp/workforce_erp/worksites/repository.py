from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import WorksiteKind
from .model import PlanningEntry, Worksite


class WorksiteRepository(Protocol):
    def list_all(self) -> Sequence[Worksite]:
        raise NotImplementedError

    def get_by_id(self, worksite_id: int) -> Optional[Worksite]:
        raise NotImplementedError

    def add(self, *, name: str, address: str, kind: WorksiteKind) -> int:
        raise NotImplementedError

    def save(self, worksite: Worksite) -> bool:
        raise NotImplementedError


class PlanningRepository(Protocol):
    def list_range(self, start_date: date, end_date: date) -> Sequence[PlanningEntry]:
        raise NotImplementedError

    def upsert(self, entry: PlanningEntry) -> None:
        raise NotImplementedError

    def remove(self, work_date: date, employee_id: str) -> bool:
        raise NotImplementedError

    def remove_worksite(self, worksite_id: int) -> int:
        """Drop every entry pointing at the worksite; returns the count."""
        raise NotImplementedError
