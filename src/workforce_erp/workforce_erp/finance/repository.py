from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import House, MiscExpense, Revenue


class FinanceRepository(Protocol):
    def list_houses(self) -> Sequence[House]:
        raise NotImplementedError

    def get_house(self, house_id: int) -> Optional[House]:
        raise NotImplementedError

    def add_house(self, *, name: str, address: str, rent: Decimal) -> int:
        raise NotImplementedError

    def save_house(self, house: House) -> None:
        raise NotImplementedError

    def delete_house(self, house_id: int) -> bool:
        raise NotImplementedError

    def list_revenue(self) -> Sequence[Revenue]:
        raise NotImplementedError

    def get_revenue(self, revenue_id: str) -> Optional[Revenue]:
        raise NotImplementedError

    def save_revenue(self, revenue: Revenue) -> None:
        raise NotImplementedError

    def list_expenses(self) -> Sequence[MiscExpense]:
        raise NotImplementedError

    def get_expense(self, expense_id: str) -> Optional[MiscExpense]:
        raise NotImplementedError

    def save_expense(self, expense: MiscExpense) -> None:
        raise NotImplementedError
