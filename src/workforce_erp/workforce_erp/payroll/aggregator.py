from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Collection, Iterable, Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import ApprovalStatus
from ..worklogs.model import WorkLogEntry

logger = logging.getLogger(__name__)

SUNDAY = 6


@dataclass(frozen=True)
class WorkTotals:
    total_minutes: int = 0
    bonus_minutes: int = 0


def aggregate_work_logs(
    work_logs: Iterable[WorkLogEntry],
    employee_id: str,
    start_date: Any,
    end_date: Any,
    *,
    statuses: Optional[Collection[ApprovalStatus]] = None,
) -> WorkTotals:
    """Sum worked minutes of one employee inside ``[start_date, end_date]``.

    ``statuses=None`` counts entries in any status; pass ``APPROVED_ONLY``
    to restrict to approved work. Sunday minutes are counted a second time
    in ``bonus_minutes``, which is always a subset of ``total_minutes``.
    """
    start = coerce_date(start_date)
    end = coerce_date(end_date)
    if start is None or end is None:
        return WorkTotals()

    total = 0
    bonus = 0
    for log in work_logs:
        if log.employee_id != employee_id:
            continue
        if statuses is not None and log.status not in statuses:
            continue
        work_date = coerce_date(log.work_date)
        if work_date is None:
            logger.warning("Skipping work log %s with unparseable date %r", log.log_id, log.work_date)
            continue
        if not (start <= work_date <= end):
            continue
        minutes = max(int(log.total_minutes or 0), 0)
        total += minutes
        if work_date.weekday() == SUNDAY:
            bonus += minutes

    return WorkTotals(total_minutes=total, bonus_minutes=bonus)
