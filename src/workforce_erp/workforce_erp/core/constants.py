"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

from .enums import ApprovalStatus

# Status filters for the work log aggregator.
ANY_STATUS = None
APPROVED_ONLY = frozenset({ApprovalStatus.APPROVED})

# Sunday work is paid once more at this fraction of the hourly rate.
SUNDAY_BONUS_RATE = Decimal("1")

# Time-based logs: a break is deducted from long days.
BREAK_THRESHOLD_MINUTES = 360
BREAK_MINUTES = 30

# Output-based logs: minutes credited per unit of work.
DEPARTURE_ROOM_MINUTES = 30
STAYOVER_ROOM_MINUTES = 20
EXTRA_BED_MINUTES = 5

DEFAULT_PAGE_LIMIT = 200

DEFAULT_ANNOUNCEMENT_CATEGORY = "General"
