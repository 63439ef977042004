from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import WorkLogDetail


class MinutesStrategy(ABC):
    """Strategy Pattern: encapsulate how a work day turns into minutes."""

    @abstractmethod
    def accepts(self, detail: WorkLogDetail) -> bool:
        raise NotImplementedError

    @abstractmethod
    def total_minutes(self, detail: WorkLogDetail) -> int:
        raise NotImplementedError
