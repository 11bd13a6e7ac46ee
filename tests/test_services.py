from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import pytest

from src.timekeeping.timekeeping.core.enums import EventKind, WorkStatus
from src.timekeeping.timekeeping.core.exceptions import ValidationError
from src.timekeeping.timekeeping.summaries.model import AttendanceSummary
from src.timekeeping.timekeeping.timelogs.model import TimeLogEvent
from src.timekeeping.timekeeping.workhours.model import WorkHoursRecord
from src.timekeeping.timekeeping.workhours.service import TimekeepingService, parse_event_kind


class InMemoryTimeLogs:
    def __init__(self):
        self.events: list[TimeLogEvent] = []

    def add(self, *, employee_id: int, timestamp: datetime, kind: EventKind) -> int:
        self.events.append(TimeLogEvent(employee_id=employee_id, timestamp=timestamp, kind=kind))
        return len(self.events)

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date):
        return [e for e in self.events if e.employee_id == employee_id and start <= e.work_date <= end]


class InMemoryWorkHours:
    def __init__(self):
        self.by_key: dict[tuple[int, date], WorkHoursRecord] = {}

    def upsert(self, record: WorkHoursRecord) -> None:
        self.by_key[(record.employee_id, record.work_date)] = record

    def get(self, *, employee_id: int, work_date: date) -> Optional[WorkHoursRecord]:
        return self.by_key.get((employee_id, work_date))

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date):
        return [r for (e, d), r in sorted(self.by_key.items()) if e == employee_id and start <= d <= end]

    def list_for_date(self, work_date: date):
        return [r for (_, d), r in sorted(self.by_key.items()) if d == work_date]


class InMemorySummaries:
    def __init__(self):
        self.by_key: dict[tuple[int, int, int], AttendanceSummary] = {}

    def replace(self, summary: AttendanceSummary) -> None:
        self.by_key[(summary.employee_id, summary.month, summary.year)] = summary

    def get(self, *, employee_id: int, month: int, year: int) -> Optional[AttendanceSummary]:
        return self.by_key.get((employee_id, month, year))

    def list_for_employee(self, *, employee_id: int, year: int):
        return [s for (e, _, y), s in sorted(self.by_key.items()) if e == employee_id and y == year]

    def list_for_month(self, *, month: int, year: int):
        return [s for (_, m, y), s in sorted(self.by_key.items()) if m == month and y == year]


@dataclass
class InMemoryLeaves:
    dates: set[tuple[int, date]] = field(default_factory=set)
    days_per_month: dict[tuple[int, int, int], int] = field(default_factory=dict)

    def is_on_leave(self, *, employee_id: int, work_date: date) -> bool:
        return (employee_id, work_date) in self.dates

    def leave_days_in_month(self, *, employee_id: int, month: int, year: int) -> int:
        return self.days_per_month.get((employee_id, month, year), 0)


@dataclass
class InMemoryHolidays:
    dates: list[date] = field(default_factory=list)

    def list_between(self, *, start: date, end: date):
        return [d for d in self.dates if start <= d <= end]


def build_service(settings, *, leaves=None, holidays=None):
    time_logs = InMemoryTimeLogs()
    work_hours = InMemoryWorkHours()
    summaries = InMemorySummaries()
    svc = TimekeepingService(
        time_logs,
        work_hours,
        summaries,
        leaves or InMemoryLeaves(),
        holidays,
        settings=settings,
    )
    return svc, time_logs, work_hours, summaries


def punch(time_logs: InMemoryTimeLogs, kind: EventKind, *args: int) -> None:
    time_logs.add(employee_id=1, timestamp=datetime(*args), kind=kind)


def test_record_event_rederives_day(settings):
    svc, time_logs, work_hours, _ = build_service(settings)

    first = svc.record_event(1, "check-in", timestamp=datetime(2025, 3, 3, 8, 5, 0, 123456))
    assert first.status == WorkStatus.PRESENT
    assert first.regular_hours == Decimal("0.00")

    second = svc.record_event(1, "checkout", timestamp=datetime(2025, 3, 3, 17, 10))
    assert second.regular_hours == Decimal("8.00")
    assert second.overtime_hours == Decimal("0.08")
    assert work_hours.get(employee_id=1, work_date=date(2025, 3, 3)) == second
    assert time_logs.events[0].timestamp.microsecond == 0


def test_late_arriving_earlier_checkin_overwrites_record(settings):
    svc, _, work_hours, _ = build_service(settings)

    svc.record_event(1, EventKind.CHECK_IN, timestamp=datetime(2025, 3, 3, 9, 0))
    assert work_hours.get(employee_id=1, work_date=date(2025, 3, 3)).status == WorkStatus.LATE

    svc.record_event(1, EventKind.CHECK_IN, timestamp=datetime(2025, 3, 3, 7, 55))
    assert work_hours.get(employee_id=1, work_date=date(2025, 3, 3)).status == WorkStatus.PRESENT


def test_rebuild_month(settings):
    leaves = InMemoryLeaves(dates={(1, date(2025, 3, 7))}, days_per_month={(1, 3, 2025): 1})
    svc, time_logs, work_hours, summaries = build_service(settings, leaves=leaves)

    punch(time_logs, EventKind.CHECK_IN, 2025, 3, 3, 8, 5)
    punch(time_logs, EventKind.CHECK_OUT, 2025, 3, 3, 17, 10)
    punch(time_logs, EventKind.CHECK_IN, 2025, 3, 4, 9, 25)
    punch(time_logs, EventKind.CHECK_IN, 2025, 3, 9, 8, 30)
    punch(time_logs, EventKind.CHECK_OUT, 2025, 3, 9, 17, 0)

    summary = svc.rebuild_month(1, 3, 2025, today=date(2025, 3, 10))

    assert len(work_hours.by_key) == 10
    assert summary.total_hours == Decimal("15.58")
    assert summary.overtime_hours == Decimal("0.08")
    assert summary.late_minutes == 115
    assert summary.penalty_amount == 100000
    assert summary.leave_days == 1
    assert (summary.present_days, summary.late_days, summary.absent_days, summary.leave_records) == (1, 2, 4, 1)
    assert svc.get_summary(1, 3, 2025) == summary

    again = svc.rebuild_month(1, 3, 2025, today=date(2025, 3, 10))
    assert again == summary


def test_rebuild_month_respects_holidays(settings):
    svc, _, _, _ = build_service(settings, holidays=InMemoryHolidays([date(2025, 3, 1), date(2025, 3, 2)]))

    summary = svc.rebuild_month(1, 3, 2025, today=date(2025, 3, 3))

    # 1st/2nd are holidays, 3rd is an ordinary absent workday.
    assert summary.absent_days == 1


def test_rebuild_future_month_is_all_zero(settings):
    svc, _, work_hours, _ = build_service(settings)

    summary = svc.rebuild_month(1, 4, 2025, today=date(2025, 3, 10))

    assert work_hours.by_key == {}
    assert summary.total_hours == 0
    assert summary.penalty_amount == 0


def test_daily_overview(settings):
    svc, _, _, _ = build_service(settings)
    svc.record_event(1, "checkin", timestamp=datetime(2025, 3, 3, 8, 0))
    svc.record_event(2, "checkin", timestamp=datetime(2025, 3, 3, 9, 0))
    svc.rederive_day(3, date(2025, 3, 3))

    overview = svc.daily_overview(date(2025, 3, 3))

    assert (overview.present, overview.late, overview.absent, overview.total) == (1, 1, 1, 3)


def test_record_event_with_aware_timestamp_uses_local_time(settings):
    svc, time_logs, _, _ = build_service(settings)
    aware = datetime(2025, 3, 3, 8, 5, tzinfo=timezone(timedelta(hours=7)))
    local = aware.astimezone().replace(tzinfo=None)

    record = svc.record_event(1, "checkin", timestamp=aware)

    assert time_logs.events[0].timestamp == local
    assert time_logs.events[0].timestamp.tzinfo is None
    assert record.work_date == local.date()
    assert svc.get_work_hours(1, local.date()) == record


def test_stored_records_and_summaries_are_read_back(settings):
    svc, _, _, _ = build_service(settings)
    svc.record_event(1, "checkin", timestamp=datetime(2025, 3, 3, 8, 0))
    svc.record_event(1, "checkin", timestamp=datetime(2025, 3, 4, 9, 0))
    jan = svc.rebuild_month(1, 1, 2025, today=date(2025, 3, 10))
    feb = svc.rebuild_month(1, 2, 2025, today=date(2025, 3, 10))
    other = svc.rebuild_month(2, 2, 2025, today=date(2025, 3, 10))

    assert svc.get_work_hours(1, date(2025, 3, 5)) is None
    assert [r.work_date for r in svc.list_work_hours(1, date(2025, 3, 1), date(2025, 3, 31))] == [
        date(2025, 3, 3),
        date(2025, 3, 4),
    ]
    assert svc.list_summaries_for_employee(1, 2025) == [jan, feb]
    assert svc.list_summaries_for_month(2, 2025) == [feb, other]

    with pytest.raises(ValidationError):
        svc.list_work_hours(1, date(2025, 3, 31), date(2025, 3, 1))
    with pytest.raises(ValidationError):
        svc.list_summaries_for_employee(1, "abc")


@pytest.mark.parametrize("kind", ["lunch", "", None])
def test_unknown_event_kind_is_rejected(kind):
    with pytest.raises(ValidationError):
        parse_event_kind(kind)


def test_invalid_inputs_raise_validation_error(settings):
    svc, _, _, _ = build_service(settings)

    with pytest.raises(ValidationError):
        svc.record_event(0, "checkin")
    with pytest.raises(ValidationError):
        svc.rebuild_month(1, 13, 2025)
