from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...common.hours import whole_minutes
from ...core.enums import WorkStatus
from ...settings.model import EngineSettings
from .base import StatusDecision, StatusStrategy


class LateStrategy(StatusStrategy):
    """Check-in after shift start + grace; lateness counts from shift start."""

    def decide(self, *, work_date: date, first_checkin: Optional[datetime], settings: EngineSettings) -> StatusDecision:
        late = whole_minutes(first_checkin - settings.shift_start_on(work_date)) if first_checkin else 0
        return StatusDecision(status=WorkStatus.LATE, late_minutes=late)
