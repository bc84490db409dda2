from __future__ import annotations

from ...core.enums import DayStatus
from ...payroll.model import DayRecord
from .base import DayContext, DayOutcome, DayStrategy


class OffDayStrategy(DayStrategy):
    """Sunday or holiday: nothing earned, nothing deducted."""

    def __init__(self, status: DayStatus):
        self.status = status

    def evaluate(self, ctx: DayContext) -> DayOutcome:
        return DayOutcome(row=DayRecord(day=ctx.day, in_time=None, out_time=None, status=self.status))
