from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_errors
from ..container import Container
from .model import Shift
from .service import working_minutes


def _shift_json(shift: Shift) -> dict:
    data = shift.to_dict()
    data["workingMinutes"] = working_minutes(shift)
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="list_shifts")
    @api_errors
    def list_shifts():
        return jsonify([_shift_json(s) for s in container.shift_service.list_shifts()])

    @app.route("/api/shifts/<int:shift_id>", methods=["GET"], endpoint="get_shift")
    @api_errors
    def get_shift(shift_id: int):
        return jsonify(_shift_json(container.shift_service.get_shift(shift_id)))

    @app.route("/api/shifts", methods=["POST"], endpoint="create_shift")
    @api_errors
    def create_shift():
        shift = Shift.from_dict(request.get_json(silent=True) or {})
        return jsonify(_shift_json(container.shift_service.create_shift(shift))), 201

    @app.route("/api/shifts/<int:shift_id>", methods=["PUT"], endpoint="update_shift")
    @api_errors
    def update_shift(shift_id: int):
        data = dict(request.get_json(silent=True) or {}, id=shift_id)
        return jsonify(_shift_json(container.shift_service.update_shift(Shift.from_dict(data))))

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="delete_shift")
    @api_errors
    def delete_shift(shift_id: int):
        container.shift_service.delete_shift(shift_id)
        return jsonify({"success": True})
