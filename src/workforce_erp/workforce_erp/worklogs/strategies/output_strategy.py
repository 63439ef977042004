from __future__ import annotations

from ...core.constants import DEPARTURE_ROOM_MINUTES, EXTRA_BED_MINUTES, STAYOVER_ROOM_MINUTES
from ...core.exceptions import ValidationError
from ..model import OutputDetail, WorkLogDetail
from .base import MinutesStrategy


class OutputBasedStrategy(MinutesStrategy):
    """Fixed minutes credited per room, extra bed and extra minute."""

    def accepts(self, detail: WorkLogDetail) -> bool:
        return isinstance(detail, OutputDetail)

    def total_minutes(self, detail: WorkLogDetail) -> int:
        if not isinstance(detail, OutputDetail):
            raise ValidationError("Output-based work needs production counters")
        return (
            detail.departures * DEPARTURE_ROOM_MINUTES
            + detail.stayovers * STAYOVER_ROOM_MINUTES
            + detail.extra_beds * EXTRA_BED_MINUTES
            + detail.extra_minutes
        )
