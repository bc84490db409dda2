from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_errors, month_args
from ..container import Container
from ..workers.model import worker_ref_id
from .model import Holiday


def _holiday_json(holiday: Holiday) -> dict:
    scope = getattr(holiday.applies_to, "value", holiday.applies_to)
    return {
        "id": holiday.holiday_id,
        "name": holiday.name,
        "date": holiday.holiday_date.isoformat() if holiday.holiday_date else None,
        "description": holiday.description,
        "appliesTo": scope,
        "employees": [worker_ref_id(e) for e in holiday.employees],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @api_errors
    def list_holidays():
        year, month = month_args()
        return jsonify([_holiday_json(h) for h in container.holiday_service.list_for_month(year=year, month=month)])

    @app.route("/api/holidays", methods=["POST"], endpoint="create_holiday")
    @api_errors
    def create_holiday():
        holiday = Holiday.from_dict(request.get_json(silent=True) or {})
        return jsonify(_holiday_json(container.holiday_service.create_holiday(holiday))), 201

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @api_errors
    def delete_holiday(holiday_id: int):
        container.holiday_service.delete_holiday(holiday_id)
        return jsonify({"success": True})
