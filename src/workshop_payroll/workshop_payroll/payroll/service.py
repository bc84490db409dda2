from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.reconciler import AttendanceReconciler
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_month
from ..core.enums import DayStatus
from ..core.exceptions import NotFoundError
from ..holidays.calendar import count_working_days
from ..holidays.model import Holiday
from ..holidays.repository import HolidayRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from ..shifts.service import working_minutes
from ..workers.model import Worker, WorkerId
from ..workers.repository import WorkerRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryReport, SalaryResult

logger = logging.getLogger(__name__)


def _as_worker(value: Any) -> Optional[Worker]:
    return Worker.from_dict(value) if isinstance(value, Mapping) else value


def _as_shift(value: Any) -> Optional[Shift]:
    return Shift.from_dict(value) if isinstance(value, Mapping) else value


def _as_holidays(values: Optional[Iterable[Any]]) -> List[Holiday]:
    return [Holiday.from_dict(h) if isinstance(h, Mapping) else h for h in values or () if h]


def _as_records(values: Optional[Iterable[Any]]) -> List[AttendanceRecord]:
    return [AttendanceRecord.from_dict(r) if isinstance(r, Mapping) else r for r in values or () if r]


def compute_salary_result(
    worker: Any,
    year: int,
    month: int,
    holidays: Optional[Iterable[Any]] = None,
    attendance_records: Optional[Iterable[Any]] = None,
    shift: Any = None,
    *,
    calculator: Optional[PayrollCalculator] = None,
    reconciler: Optional[AttendanceReconciler] = None,
) -> SalaryResult:
    """Monthly salary for one worker, or the reason it cannot be computed.

    Inputs may be domain objects or their document-shaped dicts. When
    ``attendance_records`` is None the worker's own records are used.
    """
    worker = _as_worker(worker)
    if worker is None:
        return SalaryResult.invalid("worker is missing")
    if not worker.salary:
        return SalaryResult.invalid(f"worker {worker.worker_id} has no salary")
    if not 1 <= month <= 12:
        return SalaryResult.invalid(f"month must be between 1 and 12, got {month}")

    calculator = calculator or StandardPayrollCalculator()
    reconciler = reconciler or AttendanceReconciler()
    shift = _as_shift(shift)
    holidays = _as_holidays(holidays)
    records = _as_records(worker.attendance_records if attendance_records is None else attendance_records)

    total_working_days = count_working_days(year, month, holidays, worker.worker_id)
    daily_minutes = working_minutes(shift)
    rates = calculator.rates(worker.salary, total_working_days, daily_minutes)

    outcomes = reconciler.reconcile_month(
        year=year,
        month=month,
        worker_id=worker.worker_id,
        holidays=holidays,
        records=records,
        shift=shift,
        rates=rates,
        working_minutes=daily_minutes,
    )

    present_days = 0
    total_deduction_minutes = 0
    total_deduction_amount = 0.0
    present_deduction_amount = 0.0
    for outcome in outcomes:
        if outcome.row.status == DayStatus.PRESENT:
            present_days += 1
            total_deduction_minutes += outcome.deduction.minutes
            present_deduction_amount += outcome.deduction.amount
        total_deduction_amount += outcome.deduction.amount + outcome.absence_charge

    absent_days = total_working_days - present_days
    # Absences are charged once, through per_day * absent_days, never through the row minutes.
    earned_salary = max(0, rates.per_day * present_days - present_deduction_amount)
    final_salary = max(0, worker.salary - rates.per_day * absent_days - present_deduction_amount)
    attendance_percentage = present_days / total_working_days * 100 if total_working_days > 0 else 0

    return SalaryResult.ok(
        SalaryReport(
            original_monthly_salary=worker.salary,
            earned_salary=earned_salary,
            final_salary=final_salary,
            total_working_days=total_working_days,
            present_days=present_days,
            absent_days=absent_days,
            total_deduction_minutes=total_deduction_minutes,
            total_deduction_amount=total_deduction_amount,
            attendance_percentage=attendance_percentage,
            per_minute_salary=rates.per_minute,
            daily_breakdown=tuple(o.row for o in outcomes),
        )
    )


def compute_monthly_salary(
    worker: Any,
    year: int,
    month: int,
    holidays: Optional[Iterable[Any]] = None,
    attendance_records: Optional[Iterable[Any]] = None,
    shift: Any = None,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> SalaryReport:
    """Report-only variant: invalid input yields the all-zero report."""
    return compute_salary_result(
        worker, year, month, holidays, attendance_records, shift, calculator=calculator
    ).report


@dataclass(frozen=True)
class TeamSalaryRow:
    worker_id: WorkerId
    name: str
    final_salary: float
    present_days: int
    absent_days: int
    attendance_percentage: float
    note: Optional[str] = None


class SalaryReportService:
    def __init__(
        self,
        workers: WorkerRepository,
        shifts: ShiftRepository,
        holidays: HolidayRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._workers = workers
        self._shifts = shifts
        self._holidays = holidays
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def build_monthly_result(self, worker_id: WorkerId, *, year: int, month: int) -> SalaryResult:
        year, month = require_month(year, month)
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return self._compute(worker, year, month, self._holidays.list_for_month(year=year, month=month))

    def build_monthly_report(self, worker_id: WorkerId, *, year: int, month: int) -> SalaryReport:
        return self.build_monthly_result(worker_id, year=year, month=month).report

    def build_team_summary(self, *, year: int, month: int) -> Sequence[TeamSalaryRow]:
        year, month = require_month(year, month)
        holidays = self._holidays.list_for_month(year=year, month=month)

        rows: List[TeamSalaryRow] = []
        for worker in self._workers.list_all():
            result = self._compute(worker, year, month, holidays)
            report = result.report
            rows.append(
                TeamSalaryRow(
                    worker_id=worker.worker_id,
                    name=worker.name,
                    final_salary=report.final_salary,
                    present_days=report.present_days,
                    absent_days=report.absent_days,
                    attendance_percentage=report.attendance_percentage,
                    note=result.reason,
                )
            )
        rows.sort(key=lambda r: r.name.lower())
        return rows

    def _compute(self, worker: Worker, year: int, month: int, holidays: Sequence[Holiday]) -> SalaryResult:
        shift = self._load_shift(worker)
        records = self._attendance.list_for_worker_month(worker.worker_id, year=year, month=month)
        result = compute_salary_result(
            worker, year, month, holidays, records, shift, calculator=self._calculator
        )
        if result.is_ok:
            logger.info(
                "Salary %04d-%02d worker=%s final=%.2f present=%d/%d",
                year, month, worker.worker_id, result.report.final_salary,
                result.report.present_days, result.report.total_working_days,
            )
        else:
            logger.warning("Salary %04d-%02d worker=%s not computed: %s", year, month, worker.worker_id, result.reason)
        return result

    def _load_shift(self, worker: Worker) -> Optional[Shift]:
        if worker.shift_id is None:
            return None
        shift = self._shifts.get_by_id(worker.shift_id)
        if not shift:
            logger.warning("Worker %s references missing shift %s", worker.worker_id, worker.shift_id)
        return shift
