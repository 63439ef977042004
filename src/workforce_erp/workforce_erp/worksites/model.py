from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WorksiteKind


@dataclass(frozen=True)
class Worksite:
    worksite_id: int
    name: str
    address: str
    kind: WorksiteKind
    is_active: bool = True


@dataclass(frozen=True)
class PlanningEntry:
    """Where an employee works on a given day.

    ``worksite_id`` is None for a day off. An employee without an entry for
    a day is simply not planned yet.
    """

    work_date: date
    employee_id: str
    worksite_id: Optional[int]

    @property
    def is_day_off(self) -> bool:
        return self.worksite_id is None
