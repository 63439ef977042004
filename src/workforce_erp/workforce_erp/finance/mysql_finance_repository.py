from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import ExpenseStatus, RevenueStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import House, MiscExpense, Revenue
from .repository import FinanceRepository


def _to_house(r: dict) -> House:
    return House(house_id=int(r["house_id"]), name=r["name"], address=r["address"], rent=as_decimal(r["rent"]))


def _to_revenue(r: dict) -> Revenue:
    return Revenue(
        revenue_id=str(r["revenue_id"]),
        description=r["description"],
        client=r.get("client") or "",
        date=r["revenue_date"],
        amount=as_decimal(r["amount"]),
        status=RevenueStatus(r["status"]),
    )


def _to_expense(r: dict) -> MiscExpense:
    return MiscExpense(
        expense_id=str(r["expense_id"]),
        description=r["description"],
        category=r.get("category") or "",
        date=r["expense_date"],
        amount=as_decimal(r["amount"]),
        status=ExpenseStatus(r["status"]),
    )


class MySQLFinanceRepository(FinanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_houses(self) -> Sequence[House]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT house_id, name, address, rent FROM houses ORDER BY house_id")
            return [_to_house(r) for r in fetchall(cur)]

    def get_house(self, house_id: int) -> Optional[House]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT house_id, name, address, rent FROM houses WHERE house_id=%s", (int(house_id),))
            r = fetchone(cur)
            return _to_house(r) if r else None

    def add_house(self, *, name: str, address: str, rent: Decimal) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO houses(name, address, rent) VALUES(%s,%s,%s)", (name, address, rent))
            return int(cur.lastrowid)

    def save_house(self, house: House) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO houses(house_id, name, address, rent) VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), address=VALUES(address), rent=VALUES(rent)
                """,
                (house.house_id, house.name, house.address, house.rent),
            )

    def delete_house(self, house_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM houses WHERE house_id=%s", (int(house_id),))
            return cur.rowcount > 0

    def list_revenue(self) -> Sequence[Revenue]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT revenue_id, description, client, revenue_date, amount, status FROM revenue ORDER BY revenue_date DESC"
            )
            return [_to_revenue(r) for r in fetchall(cur)]

    def get_revenue(self, revenue_id: str) -> Optional[Revenue]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT revenue_id, description, client, revenue_date, amount, status FROM revenue WHERE revenue_id=%s",
                (revenue_id,),
            )
            r = fetchone(cur)
            return _to_revenue(r) if r else None

    def save_revenue(self, revenue: Revenue) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO revenue(revenue_id, description, client, revenue_date, amount, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE description=VALUES(description), client=VALUES(client),
                    revenue_date=VALUES(revenue_date), amount=VALUES(amount), status=VALUES(status)
                """,
                (revenue.revenue_id, revenue.description, revenue.client, revenue.date, revenue.amount, revenue.status.value),
            )

    def list_expenses(self) -> Sequence[MiscExpense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT expense_id, description, category, expense_date, amount, status FROM misc_expenses "
                "ORDER BY expense_date DESC"
            )
            return [_to_expense(r) for r in fetchall(cur)]

    def get_expense(self, expense_id: str) -> Optional[MiscExpense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT expense_id, description, category, expense_date, amount, status FROM misc_expenses "
                "WHERE expense_id=%s",
                (expense_id,),
            )
            r = fetchone(cur)
            return _to_expense(r) if r else None

    def save_expense(self, expense: MiscExpense) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO misc_expenses(expense_id, description, category, expense_date, amount, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE description=VALUES(description), category=VALUES(category),
                    expense_date=VALUES(expense_date), amount=VALUES(amount), status=VALUES(status)
                """,
                (expense.expense_id, expense.description, expense.category, expense.date, expense.amount, expense.status.value),
            )
