from __future__ import annotations

from ...core.enums import DayStatus
from ...payroll.model import DayRecord
from ..deduction import calculate_daily_deduction
from .base import DayContext, DayOutcome, DayStrategy


class PresentStrategy(DayStrategy):
    """Checked in: day's pay minus late/early/lunch deductions."""

    def evaluate(self, ctx: DayContext) -> DayOutcome:
        deduction = calculate_daily_deduction(ctx.record, ctx.shift, ctx.rates.per_minute)
        row = DayRecord(
            day=ctx.day,
            in_time=ctx.record.check_in,
            out_time=ctx.record.check_out,
            status=DayStatus.PRESENT,
            deducted_minutes=deduction.minutes,
            salary_earned=max(0, ctx.rates.per_day - deduction.amount),
        )
        return DayOutcome(row=row, deduction=deduction)
