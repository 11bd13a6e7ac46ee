from __future__ import annotations

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_QUANTUM

_SECONDS_PER_HOUR = Decimal(3600)


def elapsed_hours(delta: timedelta) -> Decimal:
    """Exact decimal hours of a timedelta (second precision)."""
    return Decimal(int(delta.total_seconds())) / _SECONDS_PER_HOUR


def round_hours(value: Decimal) -> Decimal:
    """Round to two decimals, half-up. Only applied to stored values."""
    return value.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def whole_minutes(delta: timedelta) -> int:
    """Whole minutes of a positive timedelta; negative deltas count as 0."""
    seconds = int(delta.total_seconds())
    return seconds // 60 if seconds > 0 else 0


def format_hours_minutes(hours: Decimal) -> str:
    """Render decimal hours as H:MM (e.g. 8.5 -> '8:30')."""
    total_minutes = int((Decimal(hours) * 60).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{total_minutes // 60}:{total_minutes % 60:02d}"
