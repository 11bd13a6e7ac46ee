from datetime import date, datetime

from src.timekeeping.timekeeping.core.enums import EventKind
from src.timekeeping.timekeeping.timelogs.model import TimeLogEvent
from src.timekeeping.timekeeping.timelogs.normalizer import EventNormalizer

DAY = date(2025, 3, 3)


def ev(hh: int, mm: int, kind: EventKind, *, employee_id: int = 1, day: date = DAY) -> TimeLogEvent:
    return TimeLogEvent(employee_id=employee_id, timestamp=datetime(day.year, day.month, day.day, hh, mm), kind=kind)


IN, OUT = EventKind.CHECK_IN, EventKind.CHECK_OUT


def test_unordered_events_are_sorted_by_timestamp():
    events = [ev(17, 0, OUT), ev(8, 0, IN), ev(12, 0, OUT), ev(13, 0, IN)]

    day = EventNormalizer().normalize(1, DAY, events)

    assert [e.timestamp.hour for e in day.events] == [8, 12, 13, 17]
    assert day.first_checkin == datetime(2025, 3, 3, 8, 0)
    assert day.last_checkout == datetime(2025, 3, 3, 17, 0)
    assert day.warnings == ()


def test_earliest_checkin_and_latest_checkout_win():
    events = [ev(8, 10, IN), ev(8, 2, IN), ev(16, 0, OUT), ev(17, 30, OUT), ev(17, 5, OUT)]

    day = EventNormalizer().normalize(1, DAY, events)

    assert day.first_checkin == datetime(2025, 3, 3, 8, 2)
    assert day.last_checkout == datetime(2025, 3, 3, 17, 30)


def test_ties_keep_insertion_order():
    first = ev(8, 0, IN)
    second = ev(8, 0, OUT)

    day = EventNormalizer().normalize(1, DAY, [first, second])

    assert day.events == (first, second)


def test_only_checkouts_leaves_checkin_empty():
    day = EventNormalizer().normalize(1, DAY, [ev(17, 0, OUT)])

    assert day.first_checkin is None
    assert day.last_checkout == datetime(2025, 3, 3, 17, 0)


def test_checkout_before_first_checkin_is_discarded_with_warning(caplog):
    events = [ev(7, 0, OUT), ev(8, 0, IN)]

    with caplog.at_level("WARNING"):
        day = EventNormalizer().normalize(1, DAY, events)

    assert day.last_checkout is None
    assert len(day.warnings) == 1
    assert "before first checkin" in day.warnings[0]
    assert "before first checkin" in caplog.text


def test_events_of_other_days_or_employees_are_dropped():
    events = [
        ev(8, 0, IN),
        ev(1, 0, OUT, day=date(2025, 3, 4)),
        ev(17, 0, OUT, employee_id=2),
    ]

    day = EventNormalizer().normalize(1, DAY, events)

    assert day.last_checkout is None
    assert len(day.events) == 1
    assert len(day.warnings) == 2


def test_empty_input():
    day = EventNormalizer().normalize(1, DAY, [])

    assert day.events == ()
    assert day.first_checkin is None and day.last_checkout is None
