from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class PayrollAdjustments:
    """Manual amounts entered per employee and month."""

    extra: Decimal = ZERO
    discount: Decimal = ZERO


@dataclass(frozen=True)
class PayrollResult:
    base_amount: Decimal
    bonus_amount: Decimal
    total_amount: Decimal
    total_minutes: int = 0
    bonus_minutes: int = 0
    hourly_rate: Decimal = ZERO
    extra: Decimal = ZERO
    discount: Decimal = ZERO


@dataclass(frozen=True)
class PayrollLine:
    """Read-model: one employee's row in a payroll sheet."""

    employee_id: str
    name: str
    employment_type: str
    result: PayrollResult


@dataclass(frozen=True)
class PayrollSheet:
    period_start: date
    period_end: date
    lines: list[PayrollLine] = field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return sum(line.result.total_minutes for line in self.lines)

    @property
    def total_base(self) -> Decimal:
        return sum((line.result.base_amount for line in self.lines), ZERO)

    @property
    def total_bonus(self) -> Decimal:
        return sum((line.result.bonus_amount for line in self.lines), ZERO)

    @property
    def total_extra(self) -> Decimal:
        return sum((line.result.extra for line in self.lines), ZERO)

    @property
    def total_discount(self) -> Decimal:
        return sum((line.result.discount for line in self.lines), ZERO)

    @property
    def total_net(self) -> Decimal:
        return sum((line.result.total_amount for line in self.lines), ZERO)
