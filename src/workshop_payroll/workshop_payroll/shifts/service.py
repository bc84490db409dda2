from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Union

from ..common.datetime_utils import minutes_since_midnight
from ..common.validators import is_valid_hhmm, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def working_minutes(shift: Optional[Shift]) -> int:
    """Paid minutes per day: working window minus enabled lunch and break windows.

    Returns 0 when the shift or its working window is missing. The result is
    not clamped, so overnight shifts come out negative; ``validate_shift``
    reports them instead.
    """
    if not shift or not shift.working_time:
        return 0

    minutes = shift.working_time.minutes
    if shift.lunch_enabled:
        minutes -= shift.lunch_time.minutes
    if shift.break_enabled:
        minutes -= shift.break_time.minutes
    return minutes


def validate_shift(shift: Optional[Shift]) -> List[str]:
    """Collect the problems that would make payroll maths on this shift meaningless."""
    if not shift:
        return ["shift is missing"]

    problems: List[str] = []
    if not shift.name or not shift.name.strip():
        problems.append("name is required")
    if not shift.working_time:
        problems.append("workingTime is required")
        return problems

    windows = [("workingTime", shift.working_time)]
    if shift.lunch_enabled:
        windows.append(("lunchTime", shift.lunch_time))
    if shift.break_enabled:
        windows.append(("breakTime", shift.break_time))

    for label, window in windows:
        bad = [v for v in (window.start, window.end) if not is_valid_hhmm(v)]
        if bad:
            problems.append(f"{label} has malformed times: {', '.join(repr(v) for v in bad)}")
            continue
        if window.minutes <= 0:
            # Overnight windows are not supported by the minute arithmetic.
            problems.append(f"{label} must end after it starts on the same day")

    if problems:
        return problems

    work_from = minutes_since_midnight(shift.working_time.start)
    work_to = minutes_since_midnight(shift.working_time.end)
    for label, window in windows[1:]:
        if minutes_since_midnight(window.start) < work_from or minutes_since_midnight(window.end) > work_to:
            problems.append(f"{label} must lie inside workingTime")

    if working_minutes(shift) <= 0:
        problems.append("shift leaves no working minutes")
    return problems


class ShiftService:
    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def list_shifts(self) -> Sequence[Shift]:
        return self._shifts.list_all()

    def get_shift(self, shift_id: Union[int, str]) -> Shift:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError(f"Shift {shift_id} not found")
        return shift

    def create_shift(self, shift: Shift) -> Shift:
        self._ensure_valid(shift)
        shift_id = self._shifts.create(shift)
        logger.info("Created shift %s (%s), %d working minutes", shift_id, shift.name, working_minutes(shift))
        return replace(shift, shift_id=shift_id)

    def update_shift(self, shift: Shift) -> Shift:
        if shift.shift_id is None:
            raise ValidationError("shift id is required for update")
        self._ensure_valid(shift)
        if not self._shifts.update(shift):
            raise NotFoundError(f"Shift {shift.shift_id} not found")
        return shift

    def delete_shift(self, shift_id: Union[int, str]) -> None:
        if not self._shifts.delete(shift_id):
            raise NotFoundError(f"Shift {shift_id} not found")
        logger.info("Deleted shift %s", shift_id)

    @staticmethod
    def _ensure_valid(shift: Shift) -> None:
        require_non_empty(shift.name, "name")
        problems = validate_shift(shift)
        if problems:
            raise ValidationError("; ".join(problems))
