from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..core.enums import WorkStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall
from .model import WorkHoursRecord
from .repository import WorkHoursRepository

_COLUMNS = """
    employee_id, work_date, first_checkin, last_checkout, regular_hours, ot_hours,
    status, late_minutes, early_minutes, is_workday
"""


def _to_record(r: Dict[str, Any]) -> WorkHoursRecord:
    return WorkHoursRecord(
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        first_checkin=r.get("first_checkin"),
        last_checkout=r.get("last_checkout"),
        regular_hours=as_decimal(r.get("regular_hours")),
        overtime_hours=as_decimal(r.get("ot_hours")),
        status=WorkStatus(r["status"]),
        late_minutes=int(r.get("late_minutes") or 0),
        early_minutes=int(r.get("early_minutes") or 0),
        is_workday=bool(r.get("is_workday", 1)),
    )


class MySQLWorkHoursRepository(WorkHoursRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, record: WorkHoursRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_hours(employee_id, work_date, first_checkin, last_checkout, regular_hours,
                                       ot_hours, status, late_minutes, early_minutes, is_workday)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    first_checkin=VALUES(first_checkin),
                    last_checkout=VALUES(last_checkout),
                    regular_hours=VALUES(regular_hours),
                    ot_hours=VALUES(ot_hours),
                    status=VALUES(status),
                    late_minutes=VALUES(late_minutes),
                    early_minutes=VALUES(early_minutes),
                    is_workday=VALUES(is_workday)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.first_checkin,
                    record.last_checkout,
                    record.regular_hours,
                    record.overtime_hours,
                    record.status.value,
                    record.late_minutes,
                    record.early_minutes,
                    int(record.is_workday),
                ),
            )

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date) -> Sequence[WorkHoursRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM work_hours
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (employee_id, start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[WorkHoursRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_hours WHERE work_date=%s ORDER BY employee_id",
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]
