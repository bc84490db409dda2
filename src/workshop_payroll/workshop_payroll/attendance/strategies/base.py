from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ...payroll.calculator.base import Rates
from ...payroll.model import DayRecord
from ...shifts.model import Shift
from ..model import AttendanceRecord, DailyDeduction


@dataclass(frozen=True)
class DayContext:
    day: date
    record: Optional[AttendanceRecord]
    shift: Optional[Shift]
    rates: Rates
    working_minutes: int


@dataclass(frozen=True)
class DayOutcome:
    row: DayRecord
    deduction: DailyDeduction = field(default_factory=DailyDeduction)
    absence_charge: float = 0.0


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how one calendar day is classified and paid."""

    @abstractmethod
    def evaluate(self, ctx: DayContext) -> DayOutcome:
        raise NotImplementedError
