import os

from config.config import TIMEKEEPING as _TIMEKEEPING

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timekeeping_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

# Fixed values so tests don't depend on the developer's environment.
TIMEKEEPING = dict(
    _TIMEKEEPING,
    SHIFT_START="08:00",
    SHIFT_END="17:00",
    LATE_GRACE_MINUTES=20,
    BREAK_MINUTES=60,
    WEEKEND_SHIFT_DAYS=3,
    HOLIDAYS=[],
)
