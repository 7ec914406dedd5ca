from __future__ import annotations

from flask import Flask, jsonify, request

from ..clock.time_model import format_clock_time_12h
from ..common.http import json_error
from ..container import Container
from .model import DepartmentSchedule


def _to_dict(s: DepartmentSchedule) -> dict:
    return {
        "department": s.department.value,
        "entry": format_clock_time_12h(s.entry_minutes),
        "exit": format_clock_time_12h(s.exit_minutes),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments/settings", methods=["GET"], endpoint="department_settings")
    def department_settings():
        try:
            items = container.department_settings_service.list_settings()
            return jsonify({"success": True, "settings": [_to_dict(s) for s in items]})
        except Exception as e:
            return json_error(e)

    @app.route("/api/departments/settings/<department>", methods=["PUT"], endpoint="department_settings_update")
    def department_settings_update(department: str):
        try:
            data = request.get_json(silent=True) or {}
            schedule = container.department_settings_service.update_settings(
                department,
                entry=data.get("entry"),
                exit=data.get("exit"),
            )
            return jsonify({"success": True, "setting": _to_dict(schedule)})
        except Exception as e:
            return json_error(e)
