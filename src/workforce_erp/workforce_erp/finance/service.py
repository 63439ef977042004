from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.validators import require_min_length, require_non_empty, require_non_negative, require_positive
from ..core.enums import CashFlowKind, CashFlowSource, ExpenseStatus, RevenueStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollReportService
from .model import CashFlowItem, FinancialSummary, House, MiscExpense, Revenue
from .repository import FinanceRepository

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CALCULATED = "CALCULATED"


def _total(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, ZERO)


def _in_month(items, start: date, end: date) -> list:
    return [i for i in items if start <= i.date <= end]


class FinanceService:
    """Monthly money view: revenue against payroll, rent and other expenses."""

    def __init__(
        self,
        finance: FinanceRepository,
        payroll_reports: PayrollReportService,
        employees: EmployeeRepository,
    ):
        self._finance = finance
        self._payroll = payroll_reports
        self._employees = employees

    def monthly_summary(self, *, year: int, month: int) -> FinancialSummary:
        start, end = month_bounds(year, month)
        sheet = self._payroll.monthly_payroll(year=year, month=month)
        total_payroll = sheet.total_net
        total_rent = _total(h.rent for h in self._finance.list_houses())
        total_misc = _total(e.amount for e in _in_month(self._finance.list_expenses(), start, end))
        total_revenue = _total(r.amount for r in _in_month(self._finance.list_revenue(), start, end))
        total_expenses = total_payroll + total_rent + total_misc

        return FinancialSummary(
            total_payroll=total_payroll,
            total_house_rent=total_rent,
            total_misc_expenses=total_misc,
            total_expenses=total_expenses,
            total_revenue=total_revenue,
            balance=total_revenue - total_expenses,
        )

    def cash_flow(self, *, year: int, month: int) -> list[CashFlowItem]:
        """All money movements, newest first.

        Payroll and rent are not stored entries; they are derived for the
        month and dated on its last day.
        """
        first_day, last_day = month_bounds(year, month)
        items: list[CashFlowItem] = []

        for r in _in_month(self._finance.list_revenue(), first_day, last_day):
            items.append(
                CashFlowItem(
                    item_id=r.revenue_id,
                    date=r.date,
                    description=r.description,
                    amount=r.amount,
                    kind=CashFlowKind.REVENUE,
                    status=r.status.value,
                    source=CashFlowSource.REVENUE,
                    category=r.client,
                )
            )
        for e in _in_month(self._finance.list_expenses(), first_day, last_day):
            items.append(
                CashFlowItem(
                    item_id=e.expense_id,
                    date=e.date,
                    description=e.description,
                    amount=e.amount,
                    kind=CashFlowKind.EXPENSE,
                    status=e.status.value,
                    source=CashFlowSource.EXPENSE,
                    category=e.category,
                )
            )

        for line in self._payroll.monthly_payroll(year=year, month=month).lines:
            if line.result.total_amount > 0:
                items.append(
                    CashFlowItem(
                        item_id=f"payroll-{line.employee_id}",
                        date=last_day,
                        description=f"Payroll - {line.name}",
                        amount=line.result.total_amount,
                        kind=CashFlowKind.EXPENSE,
                        status=CALCULATED,
                        source=CashFlowSource.PAYROLL,
                        category="Payroll",
                    )
                )
        for h in self._finance.list_houses():
            if h.rent > 0:
                items.append(
                    CashFlowItem(
                        item_id=f"rent-{h.house_id}",
                        date=last_day,
                        description=f"Rent - {h.name}",
                        amount=h.rent,
                        kind=CashFlowKind.EXPENSE,
                        status=CALCULATED,
                        source=CashFlowSource.RENT,
                        category="Rent",
                    )
                )

        items.sort(key=lambda i: i.date, reverse=True)
        return items

    def amount_payable(self, *, year: int, month: int) -> Decimal:
        start, end = month_bounds(year, month)
        month_expenses = _in_month(self._finance.list_expenses(), start, end)
        pending_misc = _total(e.amount for e in month_expenses if e.status == ExpenseStatus.PENDING)
        payroll = self._payroll.monthly_payroll(year=year, month=month).total_net
        rent = _total(h.rent for h in self._finance.list_houses())
        return pending_misc + payroll + rent

    def amount_receivable(self) -> Decimal:
        return _total(r.amount for r in self._finance.list_revenue() if r.status == RevenueStatus.PENDING)

    def add_revenue(self, *, description: str, client: str, on: date, amount: Any) -> Revenue:
        revenue = Revenue(
            revenue_id=uuid.uuid4().hex,
            description=require_non_empty(description, "Description"),
            client=(client or "").strip(),
            date=on,
            amount=require_positive(amount, "Amount"),
        )
        self._finance.save_revenue(revenue)
        logger.info("Revenue %s added: %s", revenue.revenue_id, revenue.amount)
        return revenue

    def add_expense(self, *, description: str, category: str, on: date, amount: Any) -> MiscExpense:
        expense = MiscExpense(
            expense_id=uuid.uuid4().hex,
            description=require_non_empty(description, "Description"),
            category=(category or "").strip(),
            date=on,
            amount=require_positive(amount, "Amount"),
        )
        self._finance.save_expense(expense)
        logger.info("Expense %s added: %s", expense.expense_id, expense.amount)
        return expense

    def toggle_revenue_status(self, revenue_id: str) -> Revenue:
        revenue = self._finance.get_revenue(revenue_id)
        if not revenue:
            raise NotFoundError(f"Revenue {revenue_id} not found")
        status = RevenueStatus.RECEIVED if revenue.status == RevenueStatus.PENDING else RevenueStatus.PENDING
        updated = replace(revenue, status=status)
        self._finance.save_revenue(updated)
        return updated

    def toggle_expense_status(self, expense_id: str) -> MiscExpense:
        expense = self._finance.get_expense(expense_id)
        if not expense:
            raise NotFoundError(f"Expense {expense_id} not found")
        status = ExpenseStatus.PAID if expense.status == ExpenseStatus.PENDING else ExpenseStatus.PENDING
        updated = replace(expense, status=status)
        self._finance.save_expense(updated)
        return updated

    def get_house(self, house_id: int) -> House:
        house = self._finance.get_house(int(house_id))
        if not house:
            raise NotFoundError(f"House {house_id} not found")
        return house

    def list_houses(self) -> Sequence[House]:
        houses = list(self._finance.list_houses())
        houses.sort(key=lambda h: h.name.lower())
        return houses

    def add_house(self, *, name: str, address: str, rent: Any) -> House:
        house_id = self._finance.add_house(
            name=require_min_length(name, 2, "Name"),
            address=require_min_length(address, 5, "Address"),
            rent=require_non_negative(rent, "Rent"),
        )
        logger.info("House %s added", house_id)
        return self.get_house(house_id)

    def update_house(
        self,
        *,
        house_id: int,
        name: Optional[str] = None,
        address: Optional[str] = None,
        rent: Any = None,
    ) -> House:
        house = self.get_house(house_id)
        if name is not None:
            house = replace(house, name=require_min_length(name, 2, "Name"))
        if address is not None:
            house = replace(house, address=require_min_length(address, 5, "Address"))
        if rent is not None:
            house = replace(house, rent=require_non_negative(rent, "Rent"))
        self._finance.save_house(house)
        return house

    def delete_house(self, house_id: int) -> int:
        """Delete a house; its residents lose their house. Returns how many."""
        house = self.get_house(house_id)
        residents = [e for e in self._employees.list_all() if e.house_id == house.house_id]
        for employee in residents:
            self._employees.save(replace(employee, house_id=None))

        self._finance.delete_house(house.house_id)
        logger.info("House %s deleted, %s employees unassigned", house.house_id, len(residents))
        return len(residents)
