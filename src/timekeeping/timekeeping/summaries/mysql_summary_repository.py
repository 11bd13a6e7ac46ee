from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import AttendanceSummary
from .repository import AttendanceSummaryRepository

_SELECT = """
    SELECT employee_id, month, year, total_hours, overtime_hours, leave_days, early_minutes,
           late_minutes, penalty_amount, present_days, late_days, absent_days, leave_records
    FROM attendance_summary
"""


def _to_summary(r: Dict[str, Any]) -> AttendanceSummary:
    return AttendanceSummary(
        employee_id=int(r["employee_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        total_hours=as_decimal(r["total_hours"]),
        overtime_hours=as_decimal(r["overtime_hours"]),
        leave_days=int(r.get("leave_days") or 0),
        late_minutes=int(r.get("late_minutes") or 0),
        early_minutes=int(r.get("early_minutes") or 0),
        penalty_amount=int(as_decimal(r.get("penalty_amount"))),
        present_days=int(r.get("present_days") or 0),
        late_days=int(r.get("late_days") or 0),
        absent_days=int(r.get("absent_days") or 0),
        leave_records=int(r.get("leave_records") or 0),
    )


class MySQLAttendanceSummaryRepository(AttendanceSummaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace(self, summary: AttendanceSummary) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_summary WHERE employee_id=%s AND month=%s AND year=%s",
                (summary.employee_id, summary.month, summary.year),
            )
            cur.execute(
                """
                INSERT INTO attendance_summary(employee_id, month, year, total_hours, overtime_hours, leave_days,
                                               early_minutes, late_minutes, penalty_amount, present_days,
                                               late_days, absent_days, leave_records)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    summary.employee_id,
                    summary.month,
                    summary.year,
                    summary.total_hours,
                    summary.overtime_hours,
                    summary.leave_days,
                    summary.early_minutes,
                    summary.late_minutes,
                    summary.penalty_amount,
                    summary.present_days,
                    summary.late_days,
                    summary.absent_days,
                    summary.leave_records,
                ),
            )

    def get(self, *, employee_id: int, month: int, year: int) -> Optional[AttendanceSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE employee_id=%s AND month=%s AND year=%s",
                (employee_id, month, year),
            )
            r = fetchone(cur)
            return _to_summary(r) if r else None

    def list_for_employee(self, *, employee_id: int, year: int) -> Sequence[AttendanceSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s AND year=%s ORDER BY month", (employee_id, year))
            return [_to_summary(r) for r in fetchall(cur)]

    def list_for_month(self, *, month: int, year: int) -> Sequence[AttendanceSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE month=%s AND year=%s ORDER BY employee_id", (month, year))
            return [_to_summary(r) for r in fetchall(cur)]
