from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Rates:
    per_day: float = 0.0
    per_hour: float = 0.0
    per_minute: float = 0.0


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def per_day_salary(self, monthly_salary: Optional[float], working_days: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def per_hour_salary(self, per_day_salary: float, working_minutes: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def per_minute_salary(self, per_hour_salary: float) -> float:
        raise NotImplementedError

    def rates(self, monthly_salary: Optional[float], working_days: int, working_minutes: int) -> Rates:
        per_day = self.per_day_salary(monthly_salary, working_days)
        per_hour = self.per_hour_salary(per_day, working_minutes)
        return Rates(per_day=per_day, per_hour=per_hour, per_minute=self.per_minute_salary(per_hour))
