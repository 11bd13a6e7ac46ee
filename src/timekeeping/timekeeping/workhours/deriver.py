from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from ..common.hours import elapsed_hours, round_hours, whole_minutes
from ..settings.model import EngineSettings
from ..timelogs.model import TimeLogEvent
from ..timelogs.normalizer import EventNormalizer
from .factory import StatusStrategyFactory
from .model import ATTENDED_STATUSES, WorkHoursRecord

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)


class DailyDeriver:
    """Turns one employee's events of one day into a WorkHoursRecord.

    Pure function of its inputs: deriving the same events twice gives equal
    records, so callers may simply re-derive and overwrite when late events
    arrive.
    """

    def __init__(
        self,
        settings: EngineSettings,
        *,
        normalizer: Optional[EventNormalizer] = None,
        strategy_factory: Optional[StatusStrategyFactory] = None,
    ):
        self._settings = settings
        self._normalizer = normalizer or EventNormalizer()
        self._factory = strategy_factory or StatusStrategyFactory()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def derive(
        self,
        employee_id: int,
        work_date: date,
        events: Iterable[TimeLogEvent],
        is_workday: bool,
        *,
        on_leave: bool = False,
    ) -> WorkHoursRecord:
        day = self._normalizer.normalize(employee_id, work_date, events)
        first_in, last_out = day.first_checkin, day.last_checkout

        # Full precision until storage. Break is deducted from the span, not below 0.
        if first_in is not None and last_out is not None:
            span = last_out - first_in - timedelta(minutes=self._settings.break_minutes)
            elapsed = max(_ZERO, elapsed_hours(span))
        else:
            elapsed = _ZERO
        cap = self._settings.regular_hours_cap
        regular = min(cap, elapsed)
        overtime = max(_ZERO, elapsed - cap)

        strategy = self._factory.for_day(
            work_date=work_date,
            first_checkin=first_in,
            on_leave=on_leave,
            settings=self._settings,
        )
        decision = strategy.decide(work_date=work_date, first_checkin=first_in, settings=self._settings)

        early = 0
        if decision.status in ATTENDED_STATUSES and last_out is not None:
            early = whole_minutes(self._settings.shift_end_on(work_date) - last_out)

        record = WorkHoursRecord(
            employee_id=employee_id,
            work_date=work_date,
            first_checkin=first_in,
            last_checkout=last_out,
            regular_hours=round_hours(regular),
            overtime_hours=round_hours(overtime),
            status=decision.status,
            late_minutes=decision.late_minutes,
            early_minutes=early,
            is_workday=bool(is_workday),
            warnings=day.warnings,
        )
        logger.debug(
            "[WorkHours] employee=%s date=%s: %sh regular, %sh OT, status=%s",
            employee_id,
            work_date,
            record.regular_hours,
            record.overtime_hours,
            record.status.value,
        )
        return record
