from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import WorkStatus
from ...settings.model import EngineSettings
from .base import StatusDecision, StatusStrategy


class PresentStrategy(StatusStrategy):
    """On-time check-in (within grace)."""

    def decide(self, *, work_date: date, first_checkin: Optional[datetime], settings: EngineSettings) -> StatusDecision:
        return StatusDecision(status=WorkStatus.PRESENT)
