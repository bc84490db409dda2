from __future__ import annotations

from ...core.enums import DayStatus
from ...payroll.model import DayRecord
from .base import DayContext, DayOutcome, DayStrategy


class AbsentStrategy(DayStrategy):
    """No check-in on a working day.

    The row shows the full day's minutes for display only; the money lost is
    one day's pay, charged once at month level through ``absence_charge``.
    """

    def evaluate(self, ctx: DayContext) -> DayOutcome:
        row = DayRecord(
            day=ctx.day,
            in_time=None,
            out_time=None,
            status=DayStatus.ABSENT,
            deducted_minutes=ctx.working_minutes,
            salary_earned=0,
        )
        return DayOutcome(row=row, absence_charge=ctx.rates.per_day)
