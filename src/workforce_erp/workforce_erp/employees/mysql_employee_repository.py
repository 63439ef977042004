from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from ..core.enums import EmploymentType, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import Employee, RateRecord
from .repository import EmployeeRepository

_SELECT_EMPLOYEES = """
    SELECT employee_id, name, email, role, employment_type, start_date, phone, house_id
    FROM employees
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_employee(r: dict, rates: Sequence[RateRecord]) -> Employee:
        return Employee(
            employee_id=str(r["employee_id"]),
            name=r["name"],
            email=r["email"],
            role=Role(r["role"]),
            employment_type=EmploymentType(r["employment_type"]),
            hourly_rates=tuple(rates),
            start_date=r["start_date"],
            phone=r.get("phone") or "",
            house_id=int(r["house_id"]) if r.get("house_id") is not None else None,
        )

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_EMPLOYEES + " ORDER BY name")
            rows = fetchall(cur)
            cur.execute("SELECT employee_id, rate, effective_date FROM employee_rates ORDER BY rate_id")
            rates: dict[str, list[RateRecord]] = defaultdict(list)
            for r in fetchall(cur):
                rates[str(r["employee_id"])].append(
                    RateRecord(rate=as_decimal(r["rate"]), effective_date=r["effective_date"])
                )
            return [self._to_employee(r, rates.get(str(r["employee_id"]), [])) for r in rows]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_EMPLOYEES + " WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            if not row:
                return None
            cur.execute(
                "SELECT rate, effective_date FROM employee_rates WHERE employee_id=%s ORDER BY rate_id",
                (employee_id,),
            )
            rates = [RateRecord(rate=as_decimal(r["rate"]), effective_date=r["effective_date"]) for r in fetchall(cur)]
            return self._to_employee(row, rates)

    def _write_rates(self, cur, employee: Employee) -> None:
        cur.execute("DELETE FROM employee_rates WHERE employee_id=%s", (employee.employee_id,))
        for record in employee.hourly_rates:
            cur.execute(
                "INSERT INTO employee_rates(employee_id, rate, effective_date) VALUES(%s,%s,%s)",
                (employee.employee_id, record.rate, record.effective_date),
            )

    def add(self, employee: Employee) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, email, role, employment_type, start_date, phone, house_id)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.email,
                    employee.role.value,
                    employee.employment_type.value,
                    employee.start_date,
                    employee.phone,
                    employee.house_id,
                ),
            )
            self._write_rates(cur, employee)
            return employee.employee_id

    def save(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, role=%s, employment_type=%s, start_date=%s, phone=%s, house_id=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    employee.email,
                    employee.role.value,
                    employee.employment_type.value,
                    employee.start_date,
                    employee.phone,
                    employee.house_id,
                    employee.employee_id,
                ),
            )
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee.employee_id,))
            if not fetchone(cur):
                return False
            self._write_rates(cur, employee)
            return True
