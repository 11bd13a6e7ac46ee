from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .calendars.mysql_holiday_repository import MySQLHolidayRepository
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .settings.model import EngineSettings
from .summaries.mysql_summary_repository import MySQLAttendanceSummaryRepository
from .timelogs.mysql_time_log_repository import MySQLTimeLogRepository
from .workhours.mysql_work_hours_repository import MySQLWorkHoursRepository
from .workhours.service import TimekeepingService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    settings: EngineSettings

    time_logs_repo: MySQLTimeLogRepository
    work_hours_repo: MySQLWorkHoursRepository
    summaries_repo: MySQLAttendanceSummaryRepository
    leaves_repo: MySQLLeaveRepository
    holidays_repo: MySQLHolidayRepository

    timekeeping_service: TimekeepingService


def build_container(*, db_config: Mapping[str, Any], timekeeping: Mapping[str, Any] | None = None) -> Container:
    # Settings first: a bad configuration must fail before anything touches data.
    settings = EngineSettings.from_mapping(timekeeping)
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    time_logs_repo = MySQLTimeLogRepository(conn)
    work_hours_repo = MySQLWorkHoursRepository(conn)
    summaries_repo = MySQLAttendanceSummaryRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)

    timekeeping_service = TimekeepingService(
        time_logs_repo,
        work_hours_repo,
        summaries_repo,
        leaves_repo,
        holidays_repo,
        settings=settings,
    )

    return Container(
        conn=conn,
        settings=settings,
        time_logs_repo=time_logs_repo,
        work_hours_repo=work_hours_repo,
        summaries_repo=summaries_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        timekeeping_service=timekeeping_service,
    )
