from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import WorksiteKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PlanningEntry, Worksite
from .repository import PlanningRepository, WorksiteRepository

_COLUMNS = "worksite_id, name, address, kind, is_active"


def _to_worksite(r: dict) -> Worksite:
    return Worksite(
        worksite_id=int(r["worksite_id"]),
        name=r["name"],
        address=r["address"],
        kind=WorksiteKind(r["kind"]),
        is_active=bool(r["is_active"]),
    )


class MySQLWorksiteRepository(WorksiteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Worksite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM worksites ORDER BY name")
            return [_to_worksite(r) for r in fetchall(cur)]

    def get_by_id(self, worksite_id: int) -> Optional[Worksite]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM worksites WHERE worksite_id=%s", (int(worksite_id),))
            r = fetchone(cur)
            return _to_worksite(r) if r else None

    def add(self, *, name: str, address: str, kind: WorksiteKind) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO worksites(name, address, kind, is_active) VALUES(%s,%s,%s,1)",
                (name, address, kind.value),
            )
            return int(cur.lastrowid)

    def save(self, worksite: Worksite) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE worksites SET name=%s, address=%s, kind=%s, is_active=%s WHERE worksite_id=%s",
                (worksite.name, worksite.address, worksite.kind.value, int(worksite.is_active), worksite.worksite_id),
            )
            if cur.rowcount > 0:
                return True
            # unchanged rows report 0 affected rows
            cur.execute("SELECT 1 AS found FROM worksites WHERE worksite_id=%s", (worksite.worksite_id,))
            return fetchone(cur) is not None


class MySQLPlanningRepository(PlanningRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, start_date: date, end_date: date) -> Sequence[PlanningEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, employee_id, worksite_id FROM planning_entries
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date, employee_id
                """,
                (start_date, end_date),
            )
            return [
                PlanningEntry(
                    work_date=r["work_date"],
                    employee_id=str(r["employee_id"]),
                    worksite_id=int(r["worksite_id"]) if r["worksite_id"] is not None else None,
                )
                for r in fetchall(cur)
            ]

    def upsert(self, entry: PlanningEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO planning_entries(work_date, employee_id, worksite_id) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE worksite_id=VALUES(worksite_id)
                """,
                (entry.work_date, entry.employee_id, entry.worksite_id),
            )

    def remove(self, work_date: date, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM planning_entries WHERE work_date=%s AND employee_id=%s",
                (work_date, employee_id),
            )
            return cur.rowcount > 0

    def remove_worksite(self, worksite_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM planning_entries WHERE worksite_id=%s", (int(worksite_id),))
            return int(cur.rowcount)
