from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence, Union

from ..common.validators import require_month, require_non_empty
from ..core.enums import HolidayScope
from ..core.exceptions import NotFoundError, ValidationError
from ..workers.model import worker_ref_id
from ..workers.repository import WorkerRepository
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository, workers: WorkerRepository):
        self._holidays = holidays
        self._workers = workers

    def list_for_month(self, *, year: int, month: int) -> Sequence[Holiday]:
        year, month = require_month(year, month)
        return self._holidays.list_for_month(year=year, month=month)

    def create_holiday(self, holiday: Holiday) -> Holiday:
        name = require_non_empty(holiday.name, "name")
        if holiday.holiday_date is None:
            raise ValidationError("date is required")

        if not holiday.applies_to:
            raise ValidationError("appliesTo is required")
        try:
            scope = HolidayScope(holiday.applies_to)
        except ValueError:
            raise ValidationError(f"Invalid appliesTo value: {holiday.applies_to!r}") from None

        employees: tuple = ()
        if scope == HolidayScope.SPECIFIC:
            ids = [worker_ref_id(emp) for emp in holiday.employees or ()]
            if not ids:
                raise ValidationError("Employees are required when appliesTo is specific")
            known = self._workers.existing_ids(ids)
            missing = [i for i in ids if i not in known]
            if missing:
                raise ValidationError(f"Unknown employees: {', '.join(str(m) for m in missing)}")
            employees = tuple(ids)

        cleaned = replace(holiday, name=name, applies_to=scope, employees=employees)
        holiday_id = self._holidays.create(cleaned)
        logger.info("Created holiday %s on %s (%s)", name, cleaned.holiday_date, scope.value)
        return replace(cleaned, holiday_id=holiday_id)

    def delete_holiday(self, holiday_id: Union[int, str]) -> None:
        if not self._holidays.delete(holiday_id):
            raise NotFoundError(f"Holiday {holiday_id} not found")
        logger.info("Deleted holiday %s", holiday_id)
