from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.enums import DayStatus
from ..holidays.calendar import applicable_holiday, is_sunday
from ..holidays.model import Holiday
from ..workers.model import WorkerId
from .model import AttendanceRecord
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStrategy
from .strategies.off_strategy import OffDayStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: Sunday, then holiday, then presence, else absence."""

    def for_day(
        self,
        *,
        day: date,
        holidays: Optional[Iterable[Holiday]],
        worker_id: Optional[WorkerId],
        record: Optional[AttendanceRecord],
    ) -> DayStrategy:
        if is_sunday(day):
            return OffDayStrategy(DayStatus.OFF_SUNDAY)
        if applicable_holiday(day, holidays, worker_id):
            return OffDayStrategy(DayStatus.OFF_HOLIDAY)
        if record and record.check_in is not None:
            return PresentStrategy()
        return AbsentStrategy()
