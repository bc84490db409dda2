from __future__ import annotations

from typing import Optional

from ...core.constants import MINUTES_PER_HOUR
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary spread evenly over working days, then over shift minutes.

    Every division is guarded so a missing salary, shift or calendar yields 0.
    """

    def per_day_salary(self, monthly_salary: Optional[float], working_days: int) -> float:
        if not monthly_salary or working_days <= 0:
            return 0
        return monthly_salary / working_days

    def per_hour_salary(self, per_day_salary: float, working_minutes: int) -> float:
        if not per_day_salary or working_minutes <= 0:
            return 0
        return per_day_salary / (working_minutes / MINUTES_PER_HOUR)

    def per_minute_salary(self, per_hour_salary: float) -> float:
        if not per_hour_salary:
            return 0
        return per_hour_salary / MINUTES_PER_HOUR
