from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import CashFlowKind, CashFlowSource, ExpenseStatus, RevenueStatus


@dataclass(frozen=True)
class House:
    """Company-rented house; its rent is a monthly expense."""

    house_id: int
    name: str
    address: str
    rent: Decimal


@dataclass(frozen=True)
class Revenue:
    revenue_id: str
    description: str
    client: str
    date: date
    amount: Decimal
    status: RevenueStatus = RevenueStatus.PENDING


@dataclass(frozen=True)
class MiscExpense:
    expense_id: str
    description: str
    category: str
    date: date
    amount: Decimal
    status: ExpenseStatus = ExpenseStatus.PENDING


@dataclass(frozen=True)
class CashFlowItem:
    """Read-model: one row of the monthly cash flow table."""

    item_id: str
    date: date
    description: str
    amount: Decimal
    kind: CashFlowKind
    status: str
    source: CashFlowSource
    category: str = ""


@dataclass(frozen=True)
class FinancialSummary:
    total_payroll: Decimal
    total_house_rent: Decimal
    total_misc_expenses: Decimal
    total_expenses: Decimal
    total_revenue: Decimal
    balance: Decimal
