from __future__ import annotations

import pytest

from src.timekeeping.timekeeping.settings.model import EngineSettings


@pytest.fixture
def settings() -> EngineSettings:
    """Shift 08:00-17:00, 60 min break, 20 min grace, Wednesday/Thursday rest days."""
    return EngineSettings()


@pytest.fixture
def no_break_settings() -> EngineSettings:
    return EngineSettings(break_minutes=0)
