from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import WorkHoursRecord


class WorkHoursRepository(Protocol):
    def upsert(self, record: WorkHoursRecord) -> None:
        """Store the record, replacing any previous one for (employee_id, work_date)."""

        raise NotImplementedError

    def list_for_employee_between(self, *, employee_id: int, start: date, end: date) -> Sequence[WorkHoursRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[WorkHoursRecord]:
        raise NotImplementedError
