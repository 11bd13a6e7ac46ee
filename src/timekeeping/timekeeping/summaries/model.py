from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AttendanceSummary:
    """Thực thể miền (domain): Tổng hợp chấm công theo tháng của một nhân viên."""

    employee_id: int
    month: int
    year: int
    total_hours: Decimal
    overtime_hours: Decimal
    leave_days: int
    late_minutes: int
    early_minutes: int
    penalty_amount: int
    present_days: int = 0
    late_days: int = 0
    absent_days: int = 0
    leave_records: int = 0


@dataclass(frozen=True)
class DailyOverview:
    """Head counts for one date across employees (rest-day records excluded)."""

    work_date: date
    present: int
    late: int
    absent: int
    leave: int

    @property
    def total(self) -> int:
        return self.present + self.late + self.absent + self.leave
