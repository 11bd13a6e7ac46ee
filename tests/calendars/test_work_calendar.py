from datetime import date, timedelta

import pytest

from src.timekeeping.timekeeping.calendars.work_calendar import WorkCalendar
from src.timekeeping.timekeeping.core.enums import DayType
from src.timekeeping.timekeeping.core.exceptions import ConfigurationError

# 2025-03-03 is a Monday.
WEEK = [date(2025, 3, 3) + timedelta(days=i) for i in range(7)]
MON, TUE, WED, THU, FRI, SAT, SUN = WEEK


def test_default_shift_makes_wednesday_and_thursday_rest_days():
    cal = WorkCalendar()

    assert cal.weekend_shift_days == 3
    assert [d for d in WEEK if not cal.is_workday(d)] == [WED, THU]
    assert cal.is_workday(SAT)
    assert cal.is_workday(SUN)


def test_zero_shift_is_standard_weekend():
    cal = WorkCalendar(weekend_shift_days=0)

    assert [d for d in WEEK if not cal.is_workday(d)] == [SAT, SUN]


@pytest.mark.parametrize("shift", range(0, 14))
def test_every_shift_gives_two_rest_days_per_week(shift):
    cal = WorkCalendar(weekend_shift_days=shift)

    assert sum(1 for d in WEEK if cal.is_weekend(d)) == 2


def test_holiday_is_never_a_workday():
    cal = WorkCalendar(holidays={MON})

    assert cal.day_type(MON) == DayType.HOLIDAY
    assert not cal.is_workday(MON)
    assert cal.day_type(WED) == DayType.WEEKEND
    assert cal.day_type(TUE) == DayType.WORKDAY


def test_with_holidays_keeps_shift_and_merges():
    cal = WorkCalendar(weekend_shift_days=0, holidays={MON}).with_holidays([TUE])

    assert cal.weekend_shift_days == 0
    assert cal.holidays == frozenset({MON, TUE})


def test_days_in_month_and_workday_counts():
    march = list(WorkCalendar().days_in_month(2025, 3))

    assert len(march) == 31
    assert sum(WorkCalendar().is_workday(d) for d in march) == 23
    assert sum(WorkCalendar(weekend_shift_days=0).is_workday(d) for d in march) == 21
    assert len(list(WorkCalendar().days_in_month(2024, 2))) == 29


def test_negative_shift_is_rejected():
    with pytest.raises(ConfigurationError):
        WorkCalendar(weekend_shift_days=-1)
