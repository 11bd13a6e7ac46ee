from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import WorkStatus
from ...settings.model import EngineSettings
from .base import StatusDecision, StatusStrategy


class AbsentStrategy(StatusStrategy):
    """No check-in on the day.

    On a rest day the same status is used but the record is flagged as a
    non-workday, so it is neither counted nor penalized.
    """

    def decide(self, *, work_date: date, first_checkin: Optional[datetime], settings: EngineSettings) -> StatusDecision:
        return StatusDecision(status=WorkStatus.ABSENT)
