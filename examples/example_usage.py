"""Ví dụ: dùng engine thuần (không qua Flask, không cần CSDL).

Derives a week of work hours for one employee and prints the month summary.
"""

from datetime import date, datetime

from src.timekeeping.timekeeping.core.enums import EventKind
from src.timekeeping.timekeeping.settings.model import EngineSettings
from src.timekeeping.timekeeping.summaries.aggregator import MonthlyAggregator
from src.timekeeping.timekeeping.timelogs.model import TimeLogEvent
from src.timekeeping.timekeeping.workhours.deriver import DailyDeriver


def main():
    settings = EngineSettings()
    calendar = settings.build_calendar()
    deriver = DailyDeriver(settings)
    aggregator = MonthlyAggregator(settings.build_penalty_policy())

    punches = {
        date(2025, 3, 3): [(8, 5), (17, 10)],
        date(2025, 3, 4): [(9, 25)],
        date(2025, 3, 5): [],
        date(2025, 3, 7): [(8, 35), (16, 30)],
    }

    records = []
    for day, times in punches.items():
        events = [
            TimeLogEvent(
                employee_id=1,
                timestamp=datetime.combine(day, datetime.min.time()).replace(hour=h, minute=m),
                kind=EventKind.CHECK_IN if i == 0 else EventKind.CHECK_OUT,
            )
            for i, (h, m) in enumerate(times)
        ]
        record = deriver.derive(1, day, events, calendar.is_workday(day))
        records.append(record)
        print(day, record.status.value, record.regular_hours, record.overtime_hours, record.late_minutes)

    print(aggregator.aggregate(1, 3, 2025, records, leave_days=0))


if __name__ == "__main__":
    main()
