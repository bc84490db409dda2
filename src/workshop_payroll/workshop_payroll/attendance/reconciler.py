from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import iter_month_days
from ..holidays.model import Holiday
from ..payroll.calculator.base import Rates
from ..shifts.model import Shift
from ..workers.model import WorkerId
from .factory import DayStrategyFactory
from .model import AttendanceRecord
from .strategies.base import DayContext, DayOutcome


def records_in_month(records: Optional[Iterable[AttendanceRecord]], year: int, month: int) -> List[AttendanceRecord]:
    return [
        r
        for r in records or ()
        if r and r.record_date is not None and (r.record_date.year, r.record_date.month) == (year, month)
    ]


def find_record(records: Sequence[AttendanceRecord], day: date) -> Optional[AttendanceRecord]:
    """First record dated ``day``; later records for the same day are ignored."""
    return next((r for r in records if r.record_date == day), None)


class AttendanceReconciler:
    """Walks a month day by day and lets the matching strategy price each day."""

    def __init__(self, *, strategy_factory: Optional[DayStrategyFactory] = None):
        self._factory = strategy_factory or DayStrategyFactory()

    def reconcile_month(
        self,
        *,
        year: int,
        month: int,
        worker_id: Optional[WorkerId],
        holidays: Optional[Iterable[Holiday]],
        records: Optional[Iterable[AttendanceRecord]],
        shift: Optional[Shift],
        rates: Rates,
        working_minutes: int,
    ) -> List[DayOutcome]:
        holidays = [h for h in holidays or () if h]
        month_records = records_in_month(records, year, month)

        outcomes: List[DayOutcome] = []
        for day in iter_month_days(year, month):
            record = find_record(month_records, day)
            strategy = self._factory.for_day(day=day, holidays=holidays, worker_id=worker_id, record=record)
            ctx = DayContext(day=day, record=record, shift=shift, rates=rates, working_minutes=working_minutes)
            outcomes.append(strategy.evaluate(ctx))
        return outcomes
