from datetime import date

from src.workshop_payroll.workshop_payroll.common.datetime_utils import format_duration
from src.workshop_payroll.workshop_payroll.payroll.export import (
    DAY_COLUMNS,
    report_to_dataframe,
    report_to_excel_bytes,
    summary_to_dataframe,
    team_to_dataframe,
    team_to_excel_bytes,
)
from src.workshop_payroll.workshop_payroll.payroll.model import SalaryReport
from src.workshop_payroll.workshop_payroll.payroll.service import TeamSalaryRow, compute_monthly_salary


def test_dataframe_has_one_row_per_day(worker, shift, month_punches):
    report = compute_monthly_salary(worker, 2025, 4, [], month_punches(2025, 4, skip=(date(2025, 4, 2),)), shift)
    df = report_to_dataframe(report)

    assert list(df.columns) == DAY_COLUMNS
    assert len(df) == 30
    assert df.loc[0, "In"] == "09:00:00"
    assert df.loc[1, "Status"] == "Absent"
    assert df.loc[1, "In"] == "-"
    assert df.loc[5, "Status"] == "Off (Sunday)"


def test_empty_report_exports():
    assert report_to_dataframe(SalaryReport.zero()).empty
    assert summary_to_dataframe(SalaryReport.zero())["Value"].sum() == 0
    assert report_to_excel_bytes(SalaryReport.zero())[:2] == b"PK"


def test_format_duration():
    assert format_duration(0) == "0h 0m 0s"
    assert format_duration((2 * 3600 + 5 * 60 + 9) * 1000 + 999) == "2h 5m 9s"


def test_team_dataframe_rounds_and_blanks_missing_notes():
    rows = [
        TeamSalaryRow(worker_id=2, name="Asha", final_salary=0, present_days=0, absent_days=0, attendance_percentage=0, note="no salary"),
        TeamSalaryRow(worker_id=1, name="Ravi", final_salary=28846.153846, present_days=25, absent_days=1, attendance_percentage=96.153846),
    ]
    df = team_to_dataframe(rows)

    assert list(df["Name"]) == ["Asha", "Ravi"]
    assert df.loc[1, "Final salary"] == 28846.15
    assert df.loc[1, "Attendance %"] == 96.15
    assert list(df["Note"]) == ["no salary", ""]
    assert team_to_excel_bytes(rows)[:2] == b"PK"
