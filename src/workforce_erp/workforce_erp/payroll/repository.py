from __future__ import annotations

from typing import Protocol

from .model import PayrollAdjustments


class PayrollAdjustmentRepository(Protocol):
    """Monthly manual extras/discounts keyed by ``YYYY-MM``."""

    def get_for_month(self, month_key: str) -> dict[str, PayrollAdjustments]:
        raise NotImplementedError

    def save(self, month_key: str, employee_id: str, adjustments: PayrollAdjustments) -> None:
        raise NotImplementedError
