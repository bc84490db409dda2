from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.workshop_payroll.workshop_payroll.attendance.model import AttendanceRecord
from src.workshop_payroll.workshop_payroll.core.enums import AttendanceMethod
from src.workshop_payroll.workshop_payroll.holidays.model import Holiday
from src.workshop_payroll.workshop_payroll.shifts.model import Shift, TimeWindow
from src.workshop_payroll.workshop_payroll.workers.model import Worker


@dataclass
class InMemoryWorkers:
    workers: dict = field(default_factory=dict)

    def list_all(self):
        return list(self.workers.values())

    def get_by_id(self, worker_id) -> Optional[Worker]:
        return self.workers.get(worker_id)

    def existing_ids(self, worker_ids):
        return {i for i in worker_ids if i in self.workers}


@dataclass
class InMemoryShifts:
    shifts: dict = field(default_factory=dict)

    def list_all(self):
        return list(self.shifts.values())

    def get_by_id(self, shift_id) -> Optional[Shift]:
        return self.shifts.get(shift_id)

    def create(self, shift: Shift) -> int:
        shift_id = max(self.shifts, default=0) + 1
        self.shifts[shift_id] = replace(shift, shift_id=shift_id)
        return shift_id

    def update(self, shift: Shift) -> bool:
        if shift.shift_id not in self.shifts:
            return False
        self.shifts[shift.shift_id] = shift
        return True

    def delete(self, shift_id) -> bool:
        return self.shifts.pop(shift_id, None) is not None


@dataclass
class InMemoryHolidays:
    holidays: dict = field(default_factory=dict)

    def list_for_month(self, *, year: int, month: int):
        return [h for h in self.holidays.values() if h.falls_in(year, month)]

    def get_by_id(self, holiday_id):
        return self.holidays.get(holiday_id)

    def create(self, holiday: Holiday) -> int:
        holiday_id = max(self.holidays, default=0) + 1
        self.holidays[holiday_id] = replace(holiday, holiday_id=holiday_id)
        return holiday_id

    def delete(self, holiday_id) -> bool:
        return self.holidays.pop(holiday_id, None) is not None


@dataclass
class InMemoryAttendance:
    by_worker: dict = field(default_factory=dict)
    calls: list = field(default_factory=list)

    def list_for_worker_month(self, worker_id, *, year: int, month: int):
        self.calls.append((worker_id, year, month))
        return [
            r for r in self.by_worker.get(worker_id, [])
            if r.record_date and (r.record_date.year, r.record_date.month) == (year, month)
        ]


def standard_shift(**overrides) -> Shift:
    values = dict(
        shift_id=1,
        name="General",
        working_time=TimeWindow("09:00", "18:00"),
        lunch_time=TimeWindow("13:00", "14:00", enabled=True),
        break_time=None,
    )
    values.update(overrides)
    return Shift(**values)


def punch(day: date, check_in=(9, 0), check_out=(18, 0)) -> AttendanceRecord:
    return AttendanceRecord(
        record_date=day,
        check_in=datetime(day.year, day.month, day.day, *check_in) if check_in else None,
        check_out=datetime(day.year, day.month, day.day, *check_out) if check_out else None,
        method=AttendanceMethod.FACE,
    )


def full_month_punches(year: int, month: int, *, skip=(), overrides=None):
    """On-time punches for every Monday-Saturday of the month."""
    overrides = overrides or {}
    records = []
    day = date(year, month, 1)
    while day.month == month:
        if day.weekday() != 6 and day not in skip:
            records.append(overrides.get(day) or punch(day))
        day = date.fromordinal(day.toordinal() + 1)
    return records


@pytest.fixture
def shift() -> Shift:
    return standard_shift()


@pytest.fixture
def worker() -> Worker:
    return Worker(worker_id=1, name="Ravi", salary=30000, shift_id=1)


@pytest.fixture
def make_shift():
    return standard_shift


@pytest.fixture
def make_punch():
    return punch


@pytest.fixture
def month_punches():
    return full_month_punches


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process timezone for one test, e.g. ``local_tz("Asia/Kolkata")``."""

    def use(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield use
    monkeypatch.undo()
    time.tzset()
