from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_date, to_datetime
from ..core.enums import AttendanceMethod


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one punch pair for a worker on a calendar day.

    ``check_out`` stays empty until the worker punches out; such a record
    still counts as presence.
    """

    record_date: Optional[date]
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    method: Optional[AttendanceMethod] = None
    attendance_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        method = data.get("method")
        try:
            method = AttendanceMethod(method) if method else None
        except ValueError:
            method = None
        return cls(
            record_date=to_date(data.get("date")),
            check_in=to_datetime(data.get("checkIn")),
            check_out=to_datetime(data.get("checkOut")),
            method=method,
            attendance_id=data.get("attendance_id"),
        )


@dataclass(frozen=True)
class DailyDeduction:
    """Minutes withheld for one present day, split by cause."""

    late_minutes: int = 0
    early_minutes: int = 0
    lunch_minutes: int = 0
    amount: float = 0.0

    @property
    def minutes(self) -> int:
        return self.late_minutes + self.early_minutes + self.lunch_minutes


@dataclass(frozen=True)
class LunchViolation:
    violated: bool = False
    violation_minutes: int = 0
