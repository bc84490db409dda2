import math
from datetime import date

import pytest

from src.workshop_payroll.workshop_payroll.core.enums import DayStatus, SalaryResultStatus
from src.workshop_payroll.workshop_payroll.holidays.model import Holiday
from src.workshop_payroll.workshop_payroll.payroll.model import SalaryReport
from src.workshop_payroll.workshop_payroll.payroll.service import compute_monthly_salary, compute_salary_result
from src.workshop_payroll.workshop_payroll.workers.model import Worker

PER_DAY = 30000 / 26
PER_MINUTE = PER_DAY / 480


def test_perfect_attendance(worker, shift, month_punches):
    report = compute_monthly_salary(worker, 2025, 4, [], month_punches(2025, 4), shift)

    assert report.total_working_days == 26
    assert report.present_days == 26
    assert report.absent_days == 0
    assert report.total_deduction_minutes == 0
    assert report.final_salary == pytest.approx(30000)
    assert report.earned_salary == pytest.approx(30000)
    assert report.attendance_percentage == pytest.approx(100)
    assert report.per_minute_salary == pytest.approx(PER_MINUTE)
    assert len(report.daily_breakdown) == 30


def test_breakdown_marks_exactly_the_sundays(worker, shift, month_punches):
    report = compute_monthly_salary(worker, 2025, 4, [], month_punches(2025, 4), shift)

    sundays = [d.day for d in report.daily_breakdown if d.status == DayStatus.OFF_SUNDAY]
    assert sundays == [date(2025, 4, 6), date(2025, 4, 13), date(2025, 4, 20), date(2025, 4, 27)]


def test_late_arrival(worker, shift, month_punches, make_punch):
    late_day = date(2025, 4, 1)
    records = month_punches(2025, 4, overrides={late_day: make_punch(late_day, check_in=(9, 15))})

    report = compute_monthly_salary(worker, 2025, 4, [], records, shift)
    row = report.daily_breakdown[0]

    assert row.status == DayStatus.PRESENT
    assert row.deducted_minutes == 15
    assert row.salary_earned == pytest.approx(PER_DAY - 15 * PER_MINUTE)
    assert report.total_deduction_minutes == 15
    assert report.total_deduction_amount == pytest.approx(15 * PER_MINUTE)
    assert report.final_salary == pytest.approx(30000 - 15 * PER_MINUTE)


def test_absence_costs_exactly_one_day(worker, shift, month_punches):
    missing = date(2025, 4, 2)
    report = compute_monthly_salary(worker, 2025, 4, [], month_punches(2025, 4, skip=(missing,)), shift)
    row = report.daily_breakdown[1]

    assert row.day == missing
    assert row.status == DayStatus.ABSENT
    assert row.deducted_minutes == 480
    assert row.salary_earned == 0
    assert report.present_days == 25
    assert report.absent_days == 1
    # Row minutes are informational only.
    assert report.total_deduction_minutes == 0
    assert report.total_deduction_amount == pytest.approx(PER_DAY)
    assert report.final_salary == pytest.approx(30000 - PER_DAY)
    assert report.earned_salary == pytest.approx(25 * PER_DAY)


def test_missing_salary_returns_zero_report(shift, month_punches):
    worker = Worker(worker_id=1, name="Ravi", salary=None)
    report = compute_monthly_salary(worker, 2025, 4, [], month_punches(2025, 4), shift)

    assert report == SalaryReport.zero()
    assert report.daily_breakdown == ()
    assert report.to_dict()["dailyBreakdown"] == []


def test_invalid_inputs_are_explained():
    no_worker = compute_salary_result(None, 2025, 4)
    no_salary = compute_salary_result(Worker(worker_id=3, name="X", salary=0), 2025, 4)
    bad_month = compute_salary_result(Worker(worker_id=3, name="X", salary=100), 2025, 13)

    for result in (no_worker, no_salary, bad_month):
        assert result.status == SalaryResultStatus.INVALID_INPUT
        assert result.reason
        assert result.report == SalaryReport.zero()


def test_same_inputs_same_report(worker, shift, month_punches):
    holidays = [Holiday(name="Festival", holiday_date=date(2025, 4, 14), applies_to="all")]
    records = month_punches(2025, 4, skip=(date(2025, 4, 3),))

    first = compute_monthly_salary(worker, 2025, 4, holidays, records, shift)
    second = compute_monthly_salary(worker, 2025, 4, holidays, records, shift)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_holiday_is_off_even_with_punch(worker, shift, month_punches):
    holidays = [Holiday(name="Festival", holiday_date=date(2025, 4, 14), applies_to="all")]
    report = compute_monthly_salary(worker, 2025, 4, holidays, month_punches(2025, 4), shift)

    assert report.daily_breakdown[13].status == DayStatus.OFF_HOLIDAY
    assert report.total_working_days == 25
    assert report.present_days == 25
    assert report.final_salary == pytest.approx(30000)


def test_no_working_days_stays_finite(worker, shift):
    holidays = [Holiday(name=f"Closed {i}", holiday_date=date(2025, 4, 1), applies_to="all") for i in range(30)]
    report = compute_monthly_salary(worker, 2025, 4, holidays, [], shift)

    assert report.total_working_days == 0
    assert report.attendance_percentage == 0
    assert report.per_minute_salary == 0
    assert all(math.isfinite(v) for v in (report.final_salary, report.earned_salary, report.total_deduction_amount))


def test_missing_shift_means_no_minute_deductions(worker, month_punches, make_punch):
    late_day = date(2025, 4, 1)
    records = month_punches(2025, 4, overrides={late_day: make_punch(late_day, check_in=(11, 0))})
    report = compute_monthly_salary(worker, 2025, 4, [], records, None)

    assert report.present_days == 26
    assert report.total_deduction_minutes == 0
    assert report.final_salary == pytest.approx(30000)


def test_first_record_of_the_day_is_used(worker, shift, month_punches, make_punch):
    day = date(2025, 4, 1)
    records = month_punches(2025, 4) + [make_punch(day, check_in=(12, 0))]
    report = compute_monthly_salary(worker, 2025, 4, [], records, shift)
    assert report.daily_breakdown[0].deducted_minutes == 0


def test_checkin_without_checkout_counts_present_without_penalty(worker, shift, month_punches, make_punch):
    day = date(2025, 4, 1)
    records = month_punches(2025, 4, overrides={day: make_punch(day, check_in=(10, 0), check_out=None)})
    report = compute_monthly_salary(worker, 2025, 4, [], records, shift)

    assert report.daily_breakdown[0].status == DayStatus.PRESENT
    assert report.daily_breakdown[0].deducted_minutes == 0
    assert report.daily_breakdown[0].out_time is None


def test_document_shaped_input(local_tz):
    local_tz("Asia/Kolkata")
    worker = {
        "_id": "w1",
        "name": "Ravi",
        "salary": 30000,
        "batch": {"_id": "b1", "name": "General"},
        "attendanceRecords": [
            {
                "date": "2025-04-01T00:00:00.000Z",
                "checkIn": "2025-04-01T03:45:00.000Z",
                "checkOut": "2025-04-01T12:30:00.000Z",
                "method": "face",
            },
            {"date": "2025-03-31T00:00:00.000Z", "checkIn": "2025-03-31T09:00:00.000Z", "method": "rfid"},
        ],
    }
    shift = {
        "name": "General",
        "workingTime": {"from": "09:00", "to": "18:00"},
        "lunchTime": {"from": "13:00", "to": "14:00", "enabled": True},
        "breakTime": {"from": "16:00", "to": "16:15", "enabled": False},
    }
    holidays = [{"name": "Leave", "date": "2025-04-14", "appliesTo": "specific", "employees": [{"_id": "w1"}]}]

    report = compute_monthly_salary(worker, 2025, 4, holidays, None, shift)
    data = report.to_dict()

    assert data["totalWorkingDays"] == 25
    assert data["presentDays"] == 1
    assert data["absentDays"] == 24
    assert data["totalDeductionMinutes"] == 15
    assert data["dailyBreakdown"][0] == {
        "date": "2025-04-01",
        "inTime": "2025-04-01T09:15:00",
        "outTime": "2025-04-01T18:00:00",
        "status": "Present",
        "deductedMinutes": 15,
        "salaryEarned": pytest.approx(30000 / 25 - 15 * (30000 / 25 / 480)),
    }
    assert data["dailyBreakdown"][13]["status"] == "Off (Holiday)"
    assert data["finalSalary"] == pytest.approx(30000 - 24 * (30000 / 25) - 15 * (30000 / 25 / 480))


def test_holiday_on_a_sunday_still_lowers_working_days(worker, shift, month_punches):
    sunday = date(2025, 4, 6)
    holidays = [Holiday(name="Festival", holiday_date=sunday, applies_to="all")]

    report = compute_monthly_salary(worker, 2025, 4, holidays, month_punches(2025, 4), shift)
    per_day = 30000 / 25

    assert report.total_working_days == 25
    assert report.present_days == 26
    assert report.absent_days == -1
    assert report.daily_breakdown[5].status == DayStatus.OFF_SUNDAY
    assert report.total_deduction_amount == 0
    assert report.earned_salary == pytest.approx(26 * per_day)
    assert report.final_salary == pytest.approx(30000 + per_day)
    assert report.attendance_percentage == pytest.approx(104)
