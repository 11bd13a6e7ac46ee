from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence


class HolidayRepository(Protocol):
    def list_between(self, *, start: date, end: date) -> Sequence[date]:
        raise NotImplementedError
