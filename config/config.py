"""Shared timekeeping defaults read from the environment.

Each settings module copies ``TIMEKEEPING`` and may override single keys.
Values stay raw strings; EngineSettings.from_mapping parses them and reports
bad ones as ConfigurationError.
"""

import os


def _holidays_from_env(raw: str | None):
    return [d.strip() for d in (raw or "").split(",") if d.strip()]


TIMEKEEPING = {
    "SHIFT_START": os.getenv("SHIFT_START", "08:00"),
    "SHIFT_END": os.getenv("SHIFT_END", "17:00"),
    "LATE_GRACE_MINUTES": os.getenv("LATE_GRACE_MINUTES", "20"),
    "BREAK_MINUTES": os.getenv("BREAK_MINUTES", "60"),
    # 3 => Wednesday/Thursday rest days; set 0 for a Saturday/Sunday weekend.
    "WEEKEND_SHIFT_DAYS": os.getenv("WEEKEND_SHIFT_DAYS", "3"),
    "REGULAR_HOURS_CAP": os.getenv("REGULAR_HOURS_CAP", "8"),
    "PENALTY_TIERS": os.getenv("PENALTY_TIERS", "0:0,15:25000,30:50000,60:100000"),
    "HOLIDAYS": _holidays_from_env(os.getenv("HOLIDAYS")),
}
