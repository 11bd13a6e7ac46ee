from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Iterator

from ..common.datetime_utils import month_bounds, sunday_based_weekday
from ..core.constants import DEFAULT_WEEKEND_SHIFT_DAYS
from ..core.enums import DayType
from ..core.exceptions import ConfigurationError

_WEEKEND_INDICES = frozenset({6, 0})


class WorkCalendar:
    """Decides which dates are workdays.

    The Sunday-based weekday index (Sunday=0 ... Saturday=6) is shifted by
    ``weekend_shift_days`` before the weekend test, so with the default of 3
    the rest days are Wednesday and Thursday. Use 0 for a Saturday/Sunday
    weekend. Holidays are never workdays.
    """

    def __init__(self, *, weekend_shift_days: int = DEFAULT_WEEKEND_SHIFT_DAYS, holidays: Iterable[date] = ()):
        if int(weekend_shift_days) < 0:
            raise ConfigurationError("weekend_shift_days must be >= 0")
        self._shift = int(weekend_shift_days) % 7
        self._holidays = frozenset(holidays)

    @property
    def weekend_shift_days(self) -> int:
        return self._shift

    @property
    def holidays(self) -> frozenset[date]:
        return self._holidays

    def with_holidays(self, holidays: Iterable[date]) -> "WorkCalendar":
        return WorkCalendar(weekend_shift_days=self._shift, holidays=self._holidays | frozenset(holidays))

    def is_weekend(self, day: date) -> bool:
        shifted = (sunday_based_weekday(day) + self._shift) % 7
        return shifted in _WEEKEND_INDICES

    def day_type(self, day: date) -> DayType:
        if day in self._holidays:
            return DayType.HOLIDAY
        if self.is_weekend(day):
            return DayType.WEEKEND
        return DayType.WORKDAY

    def is_workday(self, day: date) -> bool:
        return self.day_type(day) == DayType.WORKDAY

    def days_in_month(self, year: int, month: int) -> Iterator[date]:
        start, end = month_bounds(year, month)
        day = start
        while day <= end:
            yield day
            day += timedelta(days=1)
