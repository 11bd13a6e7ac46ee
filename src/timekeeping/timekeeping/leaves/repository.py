from __future__ import annotations

from datetime import date
from typing import Protocol


class LeaveRepository(Protocol):
    """Read-only view of approved leave, owned by the leave workflow."""

    def is_on_leave(self, *, employee_id: int, work_date: date) -> bool:
        raise NotImplementedError

    def leave_days_in_month(self, *, employee_id: int, month: int, year: int) -> int:
        raise NotImplementedError
