from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Sequence

from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import TimeLogEvent
from .repository import TimeLogRepository


class MySQLTimeLogRepository(TimeLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, employee_id: int, timestamp: datetime, kind: EventKind) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_logs(employee_id, log_time, type)
                VALUES(%s,%s,%s)
                """,
                (employee_id, timestamp, kind.value),
            )
            return int(cur.lastrowid)

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date) -> Sequence[TimeLogEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, log_time, type
                FROM time_logs
                WHERE employee_id=%s AND log_time >= %s AND log_time < %s
                ORDER BY id
                """,
                (employee_id, start, end + timedelta(days=1)),
            )
            rows = fetchall(cur)
            return [
                TimeLogEvent(
                    employee_id=int(r["employee_id"]),
                    timestamp=r["log_time"].replace(microsecond=0),
                    kind=EventKind(r["type"]),
                )
                for r in rows
            ]
