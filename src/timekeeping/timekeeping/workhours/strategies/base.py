from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import WorkStatus
from ...settings.model import EngineSettings


@dataclass(frozen=True)
class StatusDecision:
    status: WorkStatus
    late_minutes: int = 0


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's attendance status."""

    @abstractmethod
    def decide(self, *, work_date: date, first_checkin: Optional[datetime], settings: EngineSettings) -> StatusDecision:
        raise NotImplementedError
