from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceSummary


class AttendanceSummaryRepository(Protocol):
    def replace(self, summary: AttendanceSummary) -> None:
        """Overwrite the whole summary for (employee_id, month, year)."""

        raise NotImplementedError

    def get(self, *, employee_id: int, month: int, year: int) -> Optional[AttendanceSummary]:
        raise NotImplementedError

    def list_for_employee(self, *, employee_id: int, year: int) -> Sequence[AttendanceSummary]:
        """All stored months of one year, oldest first."""

        raise NotImplementedError

    def list_for_month(self, *, month: int, year: int) -> Sequence[AttendanceSummary]:
        raise NotImplementedError
