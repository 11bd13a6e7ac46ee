from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from ..calendars.work_calendar import WorkCalendar
from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_PENALTY_TIERS,
    DEFAULT_SHIFT_END,
    DEFAULT_SHIFT_START,
    DEFAULT_WEEKEND_SHIFT_DAYS,
    REGULAR_HOURS_CAP,
)
from ..core.exceptions import ConfigurationError
from ..penalties.policy import PenaltyPolicy


@dataclass(frozen=True)
class EngineSettings:
    """Immutable configuration passed into every derivation/aggregation call.

    Validated on construction so a bad setup fails before any record is
    derived.
    """

    shift_start: time = DEFAULT_SHIFT_START
    shift_end: time = DEFAULT_SHIFT_END
    late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    weekend_shift_days: int = DEFAULT_WEEKEND_SHIFT_DAYS
    regular_hours_cap: Decimal = REGULAR_HOURS_CAP
    penalty_tiers: tuple[tuple[int, int], ...] = DEFAULT_PENALTY_TIERS
    holidays: frozenset[date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.late_grace_minutes < 0:
            raise ConfigurationError("late_grace_minutes must be >= 0")
        if self.break_minutes < 0:
            raise ConfigurationError("break_minutes must be >= 0")
        if self.shift_end <= self.shift_start:
            raise ConfigurationError("shift_end must be after shift_start")
        if self.weekend_shift_days < 0:
            raise ConfigurationError("weekend_shift_days must be >= 0")
        if self.regular_hours_cap <= 0:
            raise ConfigurationError("regular_hours_cap must be > 0")
        # Build once to surface tier table errors at setup time.
        PenaltyPolicy.from_pairs(self.penalty_tiers)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "EngineSettings":
        """Build settings from a config module's ``TIMEKEEPING`` dict."""

        data = dict(data or {})
        try:
            kwargs: dict[str, Any] = {}
            if "SHIFT_START" in data:
                kwargs["shift_start"] = _as_time(data["SHIFT_START"])
            if "SHIFT_END" in data:
                kwargs["shift_end"] = _as_time(data["SHIFT_END"])
            if "LATE_GRACE_MINUTES" in data:
                kwargs["late_grace_minutes"] = int(data["LATE_GRACE_MINUTES"])
            if "BREAK_MINUTES" in data:
                kwargs["break_minutes"] = int(data["BREAK_MINUTES"])
            if "WEEKEND_SHIFT_DAYS" in data:
                kwargs["weekend_shift_days"] = int(data["WEEKEND_SHIFT_DAYS"])
            if "REGULAR_HOURS_CAP" in data:
                kwargs["regular_hours_cap"] = Decimal(str(data["REGULAR_HOURS_CAP"]))
            if "PENALTY_TIERS" in data:
                kwargs["penalty_tiers"] = _as_tiers(data["PENALTY_TIERS"])
            if "HOLIDAYS" in data:
                kwargs["holidays"] = frozenset(_as_date(v) for v in data["HOLIDAYS"])
        except (TypeError, ValueError, InvalidOperation) as e:
            raise ConfigurationError(f"Invalid timekeeping settings: {e}") from e
        return cls(**kwargs)

    def shift_start_on(self, day: date) -> datetime:
        return datetime.combine(day, self.shift_start)

    def shift_end_on(self, day: date) -> datetime:
        return datetime.combine(day, self.shift_end)

    def build_calendar(self) -> WorkCalendar:
        return WorkCalendar(weekend_shift_days=self.weekend_shift_days, holidays=self.holidays)

    def build_penalty_policy(self) -> PenaltyPolicy:
        return PenaltyPolicy.from_pairs(self.penalty_tiers)


def _as_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    return parse_hhmm(str(value))


def _as_tiers(value: Any) -> tuple[tuple[int, int], ...]:
    # Either pairs, or the env form "0:0,15:25000,30:50000".
    if isinstance(value, str):
        value = [chunk.split(":") for chunk in value.split(",") if chunk.strip()]
    return tuple((int(lo), int(amount)) for lo, amount in value)


def _as_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))
