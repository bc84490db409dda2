from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, send_file

from ..common.api import api_errors, month_args
from ..container import Container
from .export import report_to_excel_bytes, team_to_excel_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workers/<int:worker_id>/salary", methods=["GET"], endpoint="worker_salary")
    @api_errors
    def worker_salary(worker_id: int):
        year, month = month_args()
        result = container.salary_service.build_monthly_result(worker_id, year=year, month=month)
        return jsonify(
            {
                "success": result.is_ok,
                "status": result.status.value,
                "reason": result.reason,
                "year": year,
                "month": month,
                "report": result.report.to_dict(),
            }
        )

    @app.route("/api/workers/<int:worker_id>/salary/export", methods=["GET"], endpoint="worker_salary_export")
    @api_errors
    def worker_salary_export(worker_id: int):
        year, month = month_args()
        report = container.salary_service.build_monthly_report(worker_id, year=year, month=month)
        return send_file(
            io.BytesIO(report_to_excel_bytes(report)),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"salary_{worker_id}_{year:04d}_{month:02d}.xlsx",
        )

    @app.route("/api/salary/summary", methods=["GET"], endpoint="salary_summary")
    @api_errors
    def salary_summary():
        year, month = month_args()
        rows = container.salary_service.build_team_summary(year=year, month=month)
        return jsonify({"success": True, "year": year, "month": month, "rows": [asdict(r) for r in rows]})

    @app.route("/api/salary/summary/export", methods=["GET"], endpoint="salary_summary_export")
    @api_errors
    def salary_summary_export():
        year, month = month_args()
        rows = container.salary_service.build_team_summary(year=year, month=month)
        return send_file(
            io.BytesIO(team_to_excel_bytes(rows)),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=f"salary_team_{year:04d}_{month:02d}.xlsx",
        )
