from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmploymentType
from .strategies.base import MinutesStrategy
from .strategies.output_strategy import OutputBasedStrategy
from .strategies.time_strategy import TimeBasedStrategy


@dataclass
class MinutesStrategyFactory:
    """Factory Pattern: choose the minutes rule from the employment type."""

    def for_employment(self, employment_type: EmploymentType) -> MinutesStrategy:
        if employment_type == EmploymentType.BY_PRODUCTION:
            return OutputBasedStrategy()
        return TimeBasedStrategy()
