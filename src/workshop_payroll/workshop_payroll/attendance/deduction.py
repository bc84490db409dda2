"""Per-day deduction minutes from punch times against the shift schedule.

Late entry, early exit and punches inside the lunch window are charged; the
break window is not checked. Every instant is built fresh from the check-in's
calendar date.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import at_wall_clock
from ..core.constants import LUNCH_VIOLATION_EXTRA_MINUTES
from ..shifts.model import Shift
from .model import AttendanceRecord, DailyDeduction, LunchViolation

_ONE_MINUTE = timedelta(minutes=1)


def ceil_minutes(delta: timedelta) -> int:
    """Whole minutes in ``delta``, rounding any started minute up."""
    return -((-delta) // _ONE_MINUTE)


def _lunch_minutes(check_in: datetime, check_out: datetime, shift: Shift) -> int:
    day = check_in.date()
    lunch_start = at_wall_clock(day, shift.lunch_time.start)
    lunch_end = at_wall_clock(day, shift.lunch_time.end)

    minutes = 0
    if lunch_start <= check_in <= lunch_end:
        minutes += max(0, ceil_minutes(check_in - lunch_start) + LUNCH_VIOLATION_EXTRA_MINUTES)
    if lunch_start <= check_out <= lunch_end:
        minutes += max(0, ceil_minutes(lunch_end - check_out) + LUNCH_VIOLATION_EXTRA_MINUTES)
    return minutes


def calculate_daily_deduction(
    record: Optional[AttendanceRecord],
    shift: Optional[Shift],
    per_minute_salary: float,
) -> DailyDeduction:
    if not record or not shift or not shift.working_time:
        return DailyDeduction()
    # Without both punches there is nothing to measure; the day still counts as present.
    if record.check_in is None or record.check_out is None:
        return DailyDeduction()

    check_in, check_out = record.check_in, record.check_out
    day = check_in.date()
    shift_start = at_wall_clock(day, shift.working_time.start)
    shift_end = at_wall_clock(day, shift.working_time.end)

    late = ceil_minutes(check_in - shift_start) if check_in > shift_start else 0
    early = ceil_minutes(shift_end - check_out) if check_out < shift_end else 0
    lunch = _lunch_minutes(check_in, check_out, shift) if shift.lunch_enabled else 0

    return DailyDeduction(
        late_minutes=late,
        early_minutes=early,
        lunch_minutes=lunch,
        amount=(late + early + lunch) * per_minute_salary,
    )


def calculate_lunch_violation(record: Optional[AttendanceRecord], shift: Optional[Shift]) -> LunchViolation:
    if not record or not shift or not shift.lunch_enabled:
        return LunchViolation()
    if record.check_in is None or record.check_out is None:
        return LunchViolation()

    minutes = _lunch_minutes(record.check_in, record.check_out, shift)
    return LunchViolation(violated=minutes > 0, violation_minutes=minutes)
