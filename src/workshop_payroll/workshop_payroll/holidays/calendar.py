"""Working-day calendar: Sundays and holidays are never working days."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import days_in_month, iter_month_days
from ..workers.model import WorkerId
from .model import Holiday

SUNDAY = 6


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def applicable_holiday(day: date, holidays: Optional[Iterable[Holiday]], worker_id: Optional[WorkerId]) -> Optional[Holiday]:
    for holiday in holidays or ():
        if holiday and holiday.holiday_date == day and holiday.applies_to_worker(worker_id):
            return holiday
    return None


def is_working_day(day: date, holidays: Optional[Iterable[Holiday]], worker_id: Optional[WorkerId]) -> bool:
    return not is_sunday(day) and applicable_holiday(day, holidays, worker_id) is None


def count_working_days(year: int, month: int, holidays: Optional[Iterable[Holiday]], worker_id: Optional[WorkerId]) -> int:
    """Days in the month minus Sundays minus holidays applying to the worker.

    Each applicable holiday in the month counts once, even when it lands on a
    Sunday or shares a date with another holiday; the result is floored at 0.
    """
    sundays = sum(1 for day in iter_month_days(year, month) if is_sunday(day))
    applicable = sum(
        1
        for holiday in holidays or ()
        if holiday and holiday.falls_in(year, month) and holiday.applies_to_worker(worker_id)
    )
    return max(0, days_in_month(year, month) - sundays - applicable)
