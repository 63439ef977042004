from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Sequence, Union

from ..common.datetime_utils import coerce_date
from ..common.validators import to_decimal
from ..core.exceptions import ValidationError
from ..employees.model import Employee, RateRecord

logger = logging.getLogger(__name__)

NO_RATE = Decimal("0")


def resolve_rate(employee: Union[Employee, Sequence[RateRecord], None], target_date: Any) -> Decimal:
    """Hourly rate in effect on ``target_date``.

    Picks the most recent record effective on or before the target date.
    When every record starts after it, the oldest record's rate is used.
    Records sharing an effective date resolve to the one stored last.
    Records whose date or rate cannot be read are ignored. Returns 0 when
    there is no usable rate history or the date cannot be parsed.
    """
    if employee is None:
        return NO_RATE
    records = employee.hourly_rates if isinstance(employee, Employee) else employee
    target = coerce_date(target_date)
    if not records or target is None:
        return NO_RATE

    dated: list[tuple[date, int, Decimal]] = []
    for index, record in enumerate(records):
        effective = coerce_date(record.effective_date)
        if effective is None:
            logger.debug("Ignoring rate record with bad effective date %r", record.effective_date)
            continue
        try:
            rate = to_decimal(record.rate, "rate")
        except ValidationError:
            logger.debug("Ignoring rate record with bad rate %r", record.rate)
            continue
        dated.append((effective, index, rate))
    if not dated:
        return NO_RATE

    # newest first; for equal dates the later index comes first
    dated.sort(key=lambda item: (item[0], item[1]), reverse=True)
    for effective, _, rate in dated:
        if effective <= target:
            return rate
    return dated[-1][2]
