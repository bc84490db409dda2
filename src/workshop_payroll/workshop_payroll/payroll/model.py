from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.enums import DayStatus, SalaryResultStatus


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class DayRecord:
    """One audit row of a salary report."""

    day: date
    in_time: Optional[datetime]
    out_time: Optional[datetime]
    status: DayStatus
    deducted_minutes: int = 0
    salary_earned: float = 0.0

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "inTime": _iso(self.in_time),
            "outTime": _iso(self.out_time),
            "status": self.status.value,
            "deductedMinutes": self.deducted_minutes,
            "salaryEarned": self.salary_earned,
        }


@dataclass(frozen=True)
class SalaryReport:
    """Computed monthly salary for one worker; never persisted."""

    original_monthly_salary: float = 0
    earned_salary: float = 0
    final_salary: float = 0
    total_working_days: int = 0
    present_days: int = 0
    absent_days: int = 0
    total_deduction_minutes: int = 0
    total_deduction_amount: float = 0
    attendance_percentage: float = 0
    per_minute_salary: float = 0
    daily_breakdown: Tuple[DayRecord, ...] = field(default_factory=tuple)

    @classmethod
    def zero(cls) -> "SalaryReport":
        return cls()

    def to_dict(self) -> dict:
        return {
            "originalMonthlySalary": self.original_monthly_salary,
            "earnedSalary": self.earned_salary,
            "finalSalary": self.final_salary,
            "totalWorkingDays": self.total_working_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalDeductionMinutes": self.total_deduction_minutes,
            "totalDeductionAmount": self.total_deduction_amount,
            "attendancePercentage": self.attendance_percentage,
            "perMinuteSalary": self.per_minute_salary,
            "dailyBreakdown": [d.to_dict() for d in self.daily_breakdown],
        }


@dataclass(frozen=True)
class SalaryResult:
    """Either a computed report or the reason the inputs could not be used.

    ``report`` is always populated; for invalid input it is the all-zero
    report older callers expect.
    """

    status: SalaryResultStatus
    report: SalaryReport
    reason: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == SalaryResultStatus.OK

    @classmethod
    def ok(cls, report: SalaryReport) -> "SalaryResult":
        return cls(status=SalaryResultStatus.OK, report=report)

    @classmethod
    def invalid(cls, reason: str) -> "SalaryResult":
        return cls(status=SalaryResultStatus.INVALID_INPUT, report=SalaryReport.zero(), reason=reason)
