from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import WorkStatus

ATTENDED_STATUSES = frozenset({WorkStatus.PRESENT, WorkStatus.LATE})


@dataclass(frozen=True)
class WorkHoursRecord:
    """Thực thể miền (domain): Giờ công của một nhân viên trong một ngày.

    Hours are stored rounded to two decimals; ``late_minutes`` and
    ``early_minutes`` feed the monthly summary.
    """

    employee_id: int
    work_date: date
    first_checkin: Optional[datetime]
    last_checkout: Optional[datetime]
    regular_hours: Decimal
    overtime_hours: Decimal
    status: WorkStatus
    late_minutes: int = 0
    early_minutes: int = 0
    is_workday: bool = True
    warnings: tuple[str, ...] = ()

    @property
    def total_hours(self) -> Decimal:
        return self.regular_hours + self.overtime_hours

    @property
    def is_attended(self) -> bool:
        return self.status in ATTENDED_STATUSES

    @property
    def is_counted(self) -> bool:
        """Whether the day takes part in present/late/absent counts."""
        return self.is_workday or self.first_checkin is not None or self.status == WorkStatus.LEAVE
