import importlib
from datetime import date, time
from decimal import Decimal

import pytest

from src.timekeeping.timekeeping.core.exceptions import ConfigurationError
from src.timekeeping.timekeeping.settings.model import EngineSettings


def test_defaults():
    s = EngineSettings()

    assert s.shift_start == time(8, 0)
    assert s.shift_end == time(17, 0)
    assert s.late_grace_minutes == 20
    assert s.weekend_shift_days == 3
    assert s.regular_hours_cap == Decimal("8")
    assert s.build_penalty_policy().penalty(60) == 100000


def test_from_mapping_parses_config_values():
    s = EngineSettings.from_mapping(
        {
            "SHIFT_START": "09:00",
            "SHIFT_END": "18:00",
            "LATE_GRACE_MINUTES": "10",
            "BREAK_MINUTES": 30,
            "WEEKEND_SHIFT_DAYS": 0,
            "REGULAR_HOURS_CAP": "7.5",
            "PENALTY_TIERS": [[0, 0], [10, 5]],
            "HOLIDAYS": ["2025-01-01"],
        }
    )

    assert s.shift_start == time(9, 0)
    assert s.late_grace_minutes == 10
    assert s.break_minutes == 30
    assert s.regular_hours_cap == Decimal("7.5")
    assert s.penalty_tiers == ((0, 0), (10, 5))
    assert not s.build_calendar().is_workday(date(2025, 1, 1))


def test_from_mapping_none_gives_defaults():
    assert EngineSettings.from_mapping(None) == EngineSettings()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"late_grace_minutes": -1},
        {"break_minutes": -5},
        {"shift_start": time(17, 0), "shift_end": time(8, 0)},
        {"weekend_shift_days": -3},
        {"regular_hours_cap": Decimal("0")},
        {"penalty_tiers": ()},
    ],
)
def test_bad_settings_fail_at_construction(kwargs):
    with pytest.raises(ConfigurationError):
        EngineSettings(**kwargs)


def test_unparsable_mapping_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        EngineSettings.from_mapping({"SHIFT_START": "8 o'clock"})


def test_testing_config_module_builds_settings(monkeypatch):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", "testing")
    module = importlib.import_module(get_settings_module())

    s = EngineSettings.from_mapping(module.TIMEKEEPING)
    assert s.weekend_shift_days == 3
    assert s.late_grace_minutes == 20


def test_penalty_tiers_accept_env_string():
    s = EngineSettings.from_mapping({"PENALTY_TIERS": "0:0,15:25000,30:50000,60:100000"})

    assert s.penalty_tiers == ((0, 0), (15, 25000), (30, 50000), (60, 100000))


@pytest.mark.parametrize("raw", ["0:0,15", "0:0,15:abc", "0:0;15:25000"])
def test_malformed_penalty_tiers_string_raises_configuration_error(raw):
    with pytest.raises(ConfigurationError):
        EngineSettings.from_mapping({"PENALTY_TIERS": raw})


def test_config_module_keeps_raw_env_values(monkeypatch):
    import config.config as base

    monkeypatch.setenv("PENALTY_TIERS", "0:0,oops")
    monkeypatch.setenv("LATE_GRACE_MINUTES", "twenty")
    module = importlib.reload(base)
    try:
        with pytest.raises(ConfigurationError):
            EngineSettings.from_mapping(module.TIMEKEEPING)
    finally:
        monkeypatch.undo()
        importlib.reload(base)
