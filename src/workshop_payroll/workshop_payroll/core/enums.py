from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Status of one calendar day in a salary report."""

    OFF_SUNDAY = "Off (Sunday)"
    OFF_HOLIDAY = "Off (Holiday)"
    PRESENT = "Present"
    ABSENT = "Absent"


class HolidayScope(str, Enum):
    """Who a holiday applies to."""

    ALL = "all"
    SPECIFIC = "specific"


class AttendanceMethod(str, Enum):
    """How a punch was captured by the attendance devices."""

    FACE = "face"
    RFID = "rfid"
    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"


class SalaryResultStatus(str, Enum):
    OK = "OK"
    INVALID_INPUT = "INVALID_INPUT"
