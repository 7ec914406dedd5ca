from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_error
from ..core.exceptions import ValidationError
from ..container import Container
from .service import record_to_dict, status_counts


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None

    @app.route("/api/attendance/import", methods=["POST"], endpoint="attendance_import")
    def attendance_import():
        try:
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                raise ValidationError("Upload a punch file in the 'file' field")

            raw_date = (request.form.get("date") or "").strip()
            work_date = _parse_date(raw_date) if raw_date else None

            summary = container.attendance_service.import_file(upload.stream, upload.filename, work_date=work_date)
            return jsonify(
                {
                    "success": True,
                    "date": summary.work_date.strftime("%Y-%m-%d"),
                    "saved": summary.saved,
                    "dropped": summary.dropped,
                    "records": [record_to_dict(r) for r in summary.records],
                }
            ), 201
        except Exception as e:
            return json_error(e)

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="attendance_day")
    def attendance_day(day: str):
        try:
            records = container.attendance_service.list_for_date(_parse_date(day))
            status = (request.args.get("status") or "").strip()
            counts = status_counts(records)
            if status:
                records = [r for r in records if r.status.value == status]
            return jsonify(
                {
                    "success": True,
                    "date": day,
                    "counts": {s.value: n for s, n in counts.items()},
                    "records": [record_to_dict(r) for r in records],
                }
            )
        except Exception as e:
            return json_error(e)

    @app.route("/api/attendance/<day>", methods=["DELETE"], endpoint="attendance_day_delete")
    def attendance_day_delete(day: str):
        try:
            removed = container.attendance_service.delete_day(_parse_date(day))
            return jsonify({"success": True, "deleted": removed})
        except Exception as e:
            return json_error(e)

    @app.route("/api/attendance/records/<int:record_id>", methods=["PATCH"], endpoint="attendance_record_update")
    def attendance_record_update(record_id: int):
        try:
            data = request.get_json(silent=True) or {}
            record = container.attendance_service.correct_record(
                record_id,
                entry=data.get("entry"),
                exit=data.get("exit"),
            )
            return jsonify({"success": True, "record": record_to_dict(record)})
        except Exception as e:
            return json_error(e)
