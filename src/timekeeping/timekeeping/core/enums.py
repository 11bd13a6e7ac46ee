from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Loại sự kiện chấm công do hệ thống nhận diện khuôn mặt phát ra."""

    CHECK_IN = "checkin"
    CHECK_OUT = "checkout"


class WorkStatus(str, Enum):
    """Trạng thái ngày công lưu trong bảng work_hours."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    LEAVE = "leave"


class DayType(str, Enum):
    WORKDAY = "workday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
