from __future__ import annotations

from datetime import datetime

from ...core.constants import BREAK_MINUTES, BREAK_THRESHOLD_MINUTES
from ...core.exceptions import ValidationError
from ..model import TimeDetail, WorkLogDetail
from .base import MinutesStrategy


class TimeBasedStrategy(MinutesStrategy):
    """(end - start), minus a break on long days, not below 0."""

    def accepts(self, detail: WorkLogDetail) -> bool:
        return isinstance(detail, TimeDetail)

    def total_minutes(self, detail: WorkLogDetail) -> int:
        if not isinstance(detail, TimeDetail):
            raise ValidationError("Time-based work needs start and end times")
        anchor = datetime(1970, 1, 1)
        span = datetime.combine(anchor, detail.end) - datetime.combine(anchor, detail.start)
        minutes = span.total_seconds() / 60
        if minutes <= 0:
            return 0
        if minutes > BREAK_THRESHOLD_MINUTES:
            minutes -= BREAK_MINUTES
        return int(round(minutes))
