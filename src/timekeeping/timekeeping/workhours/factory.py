from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..settings.model import EngineSettings
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import StatusStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: pick the status strategy in precedence order.

    leave > no check-in (absent, or uncounted on a rest day) > late > present
    """

    def for_day(
        self,
        *,
        work_date: date,
        first_checkin: Optional[datetime],
        on_leave: bool,
        settings: EngineSettings,
    ) -> StatusStrategy:
        if on_leave:
            return LeaveStrategy()
        if first_checkin is None:
            return AbsentStrategy()

        deadline = settings.shift_start_on(work_date) + timedelta(minutes=settings.late_grace_minutes)
        if first_checkin > deadline:
            return LateStrategy()
        return PresentStrategy()
