from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import EmploymentType, Role


@dataclass(frozen=True)
class RateRecord:
    """Hourly rate taking effect on ``effective_date``."""

    rate: Decimal
    effective_date: date


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee with its rate history.

    ``hourly_rates`` keeps insertion order; it is not sorted by date.
    """

    employee_id: str
    name: str
    email: str
    role: Role
    employment_type: EmploymentType
    hourly_rates: tuple[RateRecord, ...]
    start_date: date
    phone: str = ""
    house_id: Optional[int] = None
