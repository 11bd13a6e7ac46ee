from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..core.enums import WorkStatus
from ..penalties.policy import PenaltyPolicy
from ..workhours.model import WorkHoursRecord
from .model import AttendanceSummary, DailyOverview

logger = logging.getLogger(__name__)


class MonthlyAggregator:
    """Folds a month of WorkHoursRecords into one AttendanceSummary.

    The summary is always rebuilt from scratch, so re-running with the same
    inputs yields an equal summary. Partial months are fine.
    """

    def __init__(self, penalty_policy: Optional[PenaltyPolicy] = None):
        self._penalty = penalty_policy or PenaltyPolicy.default()

    def aggregate(
        self,
        employee_id: int,
        month: int,
        year: int,
        daily_records: Iterable[WorkHoursRecord],
        leave_days: int,
    ) -> AttendanceSummary:
        by_date: dict[date, WorkHoursRecord] = {}
        for rec in daily_records:
            if rec.employee_id != employee_id:
                logger.warning("[Summary] skip record of employee %s for %s", rec.employee_id, employee_id)
                continue
            if (rec.work_date.year, rec.work_date.month) != (year, month):
                logger.warning("[Summary] skip record dated %s outside %02d/%d", rec.work_date, month, year)
                continue
            # Re-derived records replace earlier ones for the same day.
            by_date[rec.work_date] = rec

        total = Decimal("0.00")
        overtime = Decimal("0.00")
        late_minutes = 0
        early_minutes = 0
        counts = {status: 0 for status in WorkStatus}

        for rec in by_date.values():
            if rec.is_counted:
                counts[rec.status] += 1
            if not rec.is_attended:
                continue
            total += rec.regular_hours + rec.overtime_hours
            overtime += rec.overtime_hours
            early_minutes += rec.early_minutes
            if rec.status == WorkStatus.LATE:
                late_minutes += rec.late_minutes

        summary = AttendanceSummary(
            employee_id=employee_id,
            month=month,
            year=year,
            total_hours=total,
            overtime_hours=overtime,
            leave_days=int(leave_days),
            late_minutes=late_minutes,
            early_minutes=early_minutes,
            penalty_amount=self._penalty.penalty(late_minutes),
            present_days=counts[WorkStatus.PRESENT],
            late_days=counts[WorkStatus.LATE],
            absent_days=counts[WorkStatus.ABSENT],
            leave_records=counts[WorkStatus.LEAVE],
        )
        logger.info(
            "[Summary] employee=%s %02d/%d: %sh total, %sh OT, late=%smin, penalty=%s",
            employee_id,
            month,
            year,
            summary.total_hours,
            summary.overtime_hours,
            summary.late_minutes,
            summary.penalty_amount,
        )
        return summary


def summarize_day(work_date: date, records: Iterable[WorkHoursRecord]) -> DailyOverview:
    counts = {status: 0 for status in WorkStatus}
    for rec in records:
        if rec.work_date == work_date and rec.is_counted:
            counts[rec.status] += 1
    return DailyOverview(
        work_date=work_date,
        present=counts[WorkStatus.PRESENT],
        late=counts[WorkStatus.LATE],
        absent=counts[WorkStatus.ABSENT],
        leave=counts[WorkStatus.LEAVE],
    )
