"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time
from decimal import Decimal

DEFAULT_SHIFT_START = time(8, 0)
DEFAULT_SHIFT_END = time(17, 0)
DEFAULT_LATE_GRACE_MINUTES = 20
# Unpaid lunch break deducted from the first-in/last-out span.
DEFAULT_BREAK_MINUTES = 60

# Sunday-based weekday index is shifted by this many days before the
# "6 or 0 is weekend" test. 3 makes Wednesday and Thursday the rest days.
DEFAULT_WEEKEND_SHIFT_DAYS = 3

REGULAR_HOURS_CAP = Decimal("8")
HOURS_QUANTUM = Decimal("0.01")

# (lower bound in minutes, amount); each band runs up to the next bound.
DEFAULT_PENALTY_TIERS = (
    (0, 0),
    (15, 25000),
    (30, 50000),
    (60, 100000),
)
