from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall
from .model import PayrollAdjustments
from .repository import PayrollAdjustmentRepository


class MySQLPayrollAdjustmentRepository(PayrollAdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_month(self, month_key: str) -> dict[str, PayrollAdjustments]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, extra, discount FROM payroll_adjustments WHERE month_key=%s",
                (month_key,),
            )
            return {
                str(r["employee_id"]): PayrollAdjustments(extra=as_decimal(r["extra"]), discount=as_decimal(r["discount"]))
                for r in fetchall(cur)
            }

    def save(self, month_key: str, employee_id: str, adjustments: PayrollAdjustments) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_adjustments(month_key, employee_id, extra, discount)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE extra=VALUES(extra), discount=VALUES(discount)
                """,
                (month_key, employee_id, adjustments.extra, adjustments.discount),
            )
