from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_on_leave(self, *, employee_id: int, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS hit FROM leave_days WHERE employee_id=%s AND leave_date=%s LIMIT 1",
                (employee_id, work_date),
            )
            return fetchone(cur) is not None

    def leave_days_in_month(self, *, employee_id: int, month: int, year: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS cnt
                FROM leave_days
                WHERE employee_id=%s AND MONTH(leave_date)=%s AND YEAR(leave_date)=%s
                """,
                (employee_id, month, year),
            )
            r = fetchone(cur)
            return int(r["cnt"]) if r else 0
