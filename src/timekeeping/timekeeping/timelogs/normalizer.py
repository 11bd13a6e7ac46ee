from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..core.enums import EventKind
from .model import NormalizedDay, TimeLogEvent

logger = logging.getLogger(__name__)


class EventNormalizer:
    """Orders a day's raw events and reduces them to first check-in / last check-out.

    Rules:
    - events are sorted by timestamp; ties keep their insertion order
    - the earliest check-in wins, later check-ins are no-ops
    - the latest check-out wins
    - a check-out earlier than the day's first check-in is discarded
    - events of another employee or another calendar day are discarded

    Discarded events are reported as warnings, never raised.
    """

    def normalize(self, employee_id: int, work_date: date, events: Iterable[TimeLogEvent]) -> NormalizedDay:
        warnings: list[str] = []
        kept: list[TimeLogEvent] = []

        for ev in events:
            if ev.employee_id != employee_id:
                warnings.append(f"Dropped event of employee {ev.employee_id} at {ev.timestamp.isoformat()}")
                continue
            if ev.work_date != work_date:
                warnings.append(f"Dropped {ev.kind.value} at {ev.timestamp.isoformat()}: not on {work_date.isoformat()}")
                continue
            kept.append(ev)

        # sorted() is stable, so equal timestamps keep insertion order.
        ordered = sorted(kept, key=lambda e: e.timestamp)

        checkins = [e for e in ordered if e.kind == EventKind.CHECK_IN]
        first_checkin = checkins[0].timestamp if checkins else None

        valid: list[TimeLogEvent] = []
        for ev in ordered:
            if ev.kind == EventKind.CHECK_OUT and first_checkin is not None and ev.timestamp < first_checkin:
                warnings.append(
                    f"Discarded checkout at {ev.timestamp.isoformat()}: before first checkin {first_checkin.isoformat()}"
                )
                continue
            valid.append(ev)

        checkouts = [e for e in valid if e.kind == EventKind.CHECK_OUT]
        last_checkout = checkouts[-1].timestamp if checkouts else None

        for msg in warnings:
            logger.warning("[TimeLogs] employee=%s date=%s: %s", employee_id, work_date, msg)

        return NormalizedDay(
            employee_id=employee_id,
            work_date=work_date,
            events=tuple(valid),
            first_checkin=first_checkin,
            last_checkout=last_checkout,
            warnings=tuple(warnings),
        )
