from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EventKind


@dataclass(frozen=True)
class TimeLogEvent:
    """Thực thể miền (domain): Một lần chấm công vào/ra đã nhận diện."""

    employee_id: int
    timestamp: datetime
    kind: EventKind

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class NormalizedDay:
    """Ordered, validated events of one employee on one calendar day."""

    employee_id: int
    work_date: date
    events: tuple[TimeLogEvent, ...]
    first_checkin: Optional[datetime]
    last_checkout: Optional[datetime]
    warnings: tuple[str, ...] = ()
