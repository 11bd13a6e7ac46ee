from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from ..core.enums import EventKind
from .model import TimeLogEvent


class TimeLogRepository(Protocol):
    def add(self, *, employee_id: int, timestamp: datetime, kind: EventKind) -> int:
        raise NotImplementedError

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date) -> Sequence[TimeLogEvent]:
        """Events with ``start <= timestamp.date() <= end`` in insertion order."""

        raise NotImplementedError
