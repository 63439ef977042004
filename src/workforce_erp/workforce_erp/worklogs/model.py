from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Union

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class TimeDetail:
    """Start/end clock times of a time-based work day."""

    start: time
    end: time


@dataclass(frozen=True)
class OutputDetail:
    """Production counters of an output-based work day."""

    departures: int = 0
    stayovers: int = 0
    extra_beds: int = 0
    extra_minutes: int = 0


WorkLogDetail = Union[TimeDetail, OutputDetail]


@dataclass(frozen=True)
class WorkLogEntry:
    """Domain entity: one work day of one employee.

    ``total_minutes`` is computed when the entry is created or edited and is
    the only figure payroll reads.
    """

    log_id: int
    employee_id: str
    work_date: date
    total_minutes: int
    status: ApprovalStatus
    detail: WorkLogDetail
