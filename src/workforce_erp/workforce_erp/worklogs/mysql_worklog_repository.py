from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ApprovalStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_time, db_cursor, fetchall, fetchone
from .model import OutputDetail, TimeDetail, WorkLogDetail, WorkLogEntry
from .repository import WorkLogRepository

_COLUMNS = """
    log_id, employee_id, work_date, total_minutes, status, detail_kind,
    start_time, end_time, departures, stayovers, extra_beds, extra_minutes
"""

TIME_KIND = "time"
OUTPUT_KIND = "output"


def _detail_columns(detail: WorkLogDetail) -> tuple:
    if isinstance(detail, TimeDetail):
        return (TIME_KIND, detail.start, detail.end, 0, 0, 0, 0)
    return (
        OUTPUT_KIND,
        None,
        None,
        int(detail.departures),
        int(detail.stayovers),
        int(detail.extra_beds),
        int(detail.extra_minutes),
    )


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_entry(r: dict) -> WorkLogEntry:
        if r["detail_kind"] == TIME_KIND:
            detail: WorkLogDetail = TimeDetail(start=as_time(r["start_time"]), end=as_time(r["end_time"]))
        else:
            detail = OutputDetail(
                departures=int(r.get("departures") or 0),
                stayovers=int(r.get("stayovers") or 0),
                extra_beds=int(r.get("extra_beds") or 0),
                extra_minutes=int(r.get("extra_minutes") or 0),
            )
        return WorkLogEntry(
            log_id=int(r["log_id"]),
            employee_id=str(r["employee_id"]),
            work_date=r["work_date"],
            total_minutes=int(r["total_minutes"]),
            status=ApprovalStatus(r["status"]),
            detail=detail,
        )

    def list_all(self) -> Sequence[WorkLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_logs ORDER BY work_date, log_id")
            return [self._to_entry(r) for r in fetchall(cur)]

    def get_by_id(self, log_id: int) -> Optional[WorkLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_logs WHERE log_id=%s", (int(log_id),))
            r = fetchone(cur)
            return self._to_entry(r) if r else None

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[WorkLogEntry]:
        clauses = ["employee_id=%s"]
        params: list[object] = [employee_id]
        if start_date is not None:
            clauses.append("work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("work_date <= %s")
            params.append(end_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE {' AND '.join(clauses)} ORDER BY work_date, log_id",
                tuple(params),
            )
            return [self._to_entry(r) for r in fetchall(cur)]

    def add(
        self,
        *,
        employee_id: str,
        work_date: date,
        total_minutes: int,
        status: ApprovalStatus,
        detail: WorkLogDetail,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(
                    employee_id, work_date, total_minutes, status, detail_kind,
                    start_time, end_time, departures, stayovers, extra_beds, extra_minutes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, work_date, int(total_minutes), status.value) + _detail_columns(detail),
            )
            return int(cur.lastrowid)

    def save(self, entry: WorkLogEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET work_date=%s, total_minutes=%s, status=%s, detail_kind=%s,
                    start_time=%s, end_time=%s, departures=%s, stayovers=%s, extra_beds=%s, extra_minutes=%s
                WHERE log_id=%s
                """,
                (entry.work_date, int(entry.total_minutes), entry.status.value)
                + _detail_columns(entry.detail)
                + (entry.log_id,),
            )
            if cur.rowcount > 0:
                return True
            # unchanged rows report 0 affected rows
            cur.execute("SELECT 1 AS found FROM work_logs WHERE log_id=%s", (entry.log_id,))
            return fetchone(cur) is not None
