from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.constants import DEFAULT_EXPORT_SHEET
from .model import SalaryReport
from .service import TeamSalaryRow

DAY_COLUMNS = ["Date", "In", "Out", "Status", "Deducted minutes", "Salary earned"]


def report_to_dataframe(report: SalaryReport) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            (d.day, d.in_time, d.out_time, d.status.value, d.deducted_minutes, d.salary_earned)
            for d in report.daily_breakdown
        ],
        columns=DAY_COLUMNS,
    )
    if not df.empty:
        df["Date"] = pd.to_datetime(df["Date"]).dt.strftime("%Y-%m-%d")
        df["In"] = pd.to_datetime(df["In"]).dt.strftime("%H:%M:%S").fillna("-")
        df["Out"] = pd.to_datetime(df["Out"]).dt.strftime("%H:%M:%S").fillna("-")
        df["Salary earned"] = df["Salary earned"].round(2)
    return df


def summary_to_dataframe(report: SalaryReport) -> pd.DataFrame:
    return pd.DataFrame(
        [
            ("Monthly salary", report.original_monthly_salary),
            ("Working days", report.total_working_days),
            ("Present days", report.present_days),
            ("Absent days", report.absent_days),
            ("Deducted minutes", report.total_deduction_minutes),
            ("Deducted amount", round(report.total_deduction_amount, 2)),
            ("Attendance %", round(report.attendance_percentage, 2)),
            ("Earned salary", round(report.earned_salary, 2)),
            ("Final salary", round(report.final_salary, 2)),
        ],
        columns=["Item", "Value"],
    )


def team_to_dataframe(rows: Sequence[TeamSalaryRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            (r.worker_id, r.name, round(r.final_salary, 2), r.present_days, r.absent_days, round(r.attendance_percentage, 2), r.note or "")
            for r in rows
        ],
        columns=["Worker", "Name", "Final salary", "Present", "Absent", "Attendance %", "Note"],
    )


def report_to_excel_bytes(report: SalaryReport, *, sheet_name: str = DEFAULT_EXPORT_SHEET) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        summary_to_dataframe(report).to_excel(writer, sheet_name=f"{sheet_name} summary", index=False)
        report_to_dataframe(report).to_excel(writer, sheet_name=sheet_name, index=False)
    return out.getvalue()


def team_to_excel_bytes(rows: Sequence[TeamSalaryRow], *, sheet_name: str = DEFAULT_EXPORT_SHEET) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        team_to_dataframe(rows).to_excel(writer, sheet_name=f"{sheet_name} team", index=False)
    return out.getvalue()
