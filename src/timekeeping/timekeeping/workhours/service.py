from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Union

from ..calendars.repository import HolidayRepository
from ..calendars.work_calendar import WorkCalendar
from ..common.datetime_utils import month_bounds, now_local, to_local_naive
from ..common.validators import require_month, require_positive_id, require_year
from ..core.enums import EventKind
from ..core.exceptions import ValidationError
from ..leaves.repository import LeaveRepository
from ..settings.model import EngineSettings
from ..summaries.aggregator import MonthlyAggregator, summarize_day
from ..summaries.model import AttendanceSummary, DailyOverview
from ..summaries.repository import AttendanceSummaryRepository
from ..timelogs.model import TimeLogEvent
from ..timelogs.repository import TimeLogRepository
from .deriver import DailyDeriver
from .model import WorkHoursRecord
from .repository import WorkHoursRepository

logger = logging.getLogger(__name__)


def parse_event_kind(value: Union[str, EventKind]) -> EventKind:
    if isinstance(value, EventKind):
        return value
    key = str(value or "").strip().lower().replace("-", "").replace("_", "")
    try:
        return EventKind(key)
    except ValueError:
        raise ValidationError(f"Loại chấm công không hợp lệ: {value!r}")


class TimekeepingService:
    """Glue between storage and the pure derivation/aggregation engine.

    Every call reads a closed set of events, recomputes, and overwrites the
    stored output for the affected key.
    """

    def __init__(
        self,
        time_logs: TimeLogRepository,
        work_hours: WorkHoursRepository,
        summaries: AttendanceSummaryRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository | None = None,
        *,
        settings: EngineSettings,
        deriver: DailyDeriver | None = None,
        aggregator: MonthlyAggregator | None = None,
    ):
        self._time_logs = time_logs
        self._work_hours = work_hours
        self._summaries = summaries
        self._leaves = leaves
        self._holidays = holidays
        self._settings = settings
        self._deriver = deriver or DailyDeriver(settings)
        self._aggregator = aggregator or MonthlyAggregator(settings.build_penalty_policy())

    def _calendar_for(self, start: date, end: date) -> WorkCalendar:
        calendar = self._settings.build_calendar()
        if self._holidays:
            calendar = calendar.with_holidays(self._holidays.list_between(start=start, end=end))
        return calendar

    def _derive_and_store(
        self,
        employee_id: int,
        work_date: date,
        events: list[TimeLogEvent],
        calendar: WorkCalendar,
    ) -> WorkHoursRecord:
        record = self._deriver.derive(
            employee_id,
            work_date,
            events,
            calendar.is_workday(work_date),
            on_leave=self._leaves.is_on_leave(employee_id=employee_id, work_date=work_date),
        )
        self._work_hours.upsert(record)
        return record

    def record_event(
        self,
        employee_id: int,
        kind: Union[str, EventKind],
        *,
        timestamp: Optional[datetime] = None,
    ) -> WorkHoursRecord:
        """Store a recognized check-in/out and re-derive that day."""

        employee_id = require_positive_id(employee_id, "Nhân viên")
        event_kind = parse_event_kind(kind)
        timestamp = to_local_naive(timestamp or now_local()).replace(microsecond=0)

        self._time_logs.add(employee_id=employee_id, timestamp=timestamp, kind=event_kind)
        logger.info("[TimeLogs] employee=%s %s at %s", employee_id, event_kind.value, timestamp.isoformat())
        return self.rederive_day(employee_id, timestamp.date())

    def rederive_day(self, employee_id: int, work_date: date) -> WorkHoursRecord:
        employee_id = require_positive_id(employee_id, "Nhân viên")
        events = list(
            self._time_logs.list_for_employee_between(employee_id=employee_id, start=work_date, end=work_date)
        )
        return self._derive_and_store(employee_id, work_date, events, self._calendar_for(work_date, work_date))

    def rebuild_month(
        self,
        employee_id: int,
        month: int,
        year: int,
        *,
        today: Optional[date] = None,
    ) -> AttendanceSummary:
        """Re-derive every elapsed day of the month, then replace its summary."""

        employee_id = require_positive_id(employee_id, "Nhân viên")
        month, year = require_month(month, year)
        start, end = month_bounds(year, month)
        end = min(end, today or now_local().date())

        records: list[WorkHoursRecord] = []
        if start <= end:
            calendar = self._calendar_for(start, end)
            by_date: dict[date, list[TimeLogEvent]] = defaultdict(list)
            for ev in self._time_logs.list_for_employee_between(employee_id=employee_id, start=start, end=end):
                by_date[ev.work_date].append(ev)

            for day in calendar.days_in_month(year, month):
                if day > end:
                    break
                records.append(self._derive_and_store(employee_id, day, by_date.get(day, []), calendar))

        leave_days = self._leaves.leave_days_in_month(employee_id=employee_id, month=month, year=year)
        summary = self._aggregator.aggregate(employee_id, month, year, records, leave_days)
        self._summaries.replace(summary)
        return summary

    def get_summary(self, employee_id: int, month: int, year: int) -> Optional[AttendanceSummary]:
        month, year = require_month(month, year)
        return self._summaries.get(employee_id=require_positive_id(employee_id, "Nhân viên"), month=month, year=year)

    def list_summaries_for_employee(self, employee_id: int, year: int) -> list[AttendanceSummary]:
        employee_id = require_positive_id(employee_id, "Nhân viên")
        return list(self._summaries.list_for_employee(employee_id=employee_id, year=require_year(year)))

    def list_summaries_for_month(self, month: int, year: int) -> list[AttendanceSummary]:
        month, year = require_month(month, year)
        return list(self._summaries.list_for_month(month=month, year=year))

    def get_work_hours(self, employee_id: int, work_date: date) -> Optional[WorkHoursRecord]:
        """Stored record for one day, without re-deriving it."""

        records = self.list_work_hours(employee_id, work_date, work_date)
        return records[0] if records else None

    def list_work_hours(self, employee_id: int, start: date, end: date) -> list[WorkHoursRecord]:
        employee_id = require_positive_id(employee_id, "Nhân viên")
        if end < start:
            raise ValidationError("Khoảng ngày không hợp lệ")
        return list(self._work_hours.list_for_employee_between(employee_id=employee_id, start=start, end=end))

    def daily_overview(self, work_date: date) -> DailyOverview:
        return summarize_day(work_date, self._work_hours.list_for_date(work_date))
