from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_error
from ..core.exceptions import ValidationError
from ..container import Container
from .service import summary_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<name>/stats", methods=["GET"], endpoint="employee_stats")
    def employee_stats(name: str):
        try:
            periods = container.employee_stats_service.stats_by_period(name)
            return jsonify(
                {
                    "success": True,
                    "employee_name": name,
                    "periods": {period: summary_to_dict(s) for period, s in periods.items()},
                }
            )
        except Exception as e:
            return json_error(e)

    @app.route("/api/reports", methods=["GET"], endpoint="range_report")
    def range_report():
        try:
            raw_start = (request.args.get("start") or "").strip()
            raw_end = (request.args.get("end") or "").strip()
            if not raw_start or not raw_end:
                raise ValidationError("start and end are required (YYYY-MM-DD)")
            try:
                start, end = parse_iso_date(raw_start), parse_iso_date(raw_end)
            except ValueError:
                raise ValidationError("start and end must be YYYY-MM-DD") from None

            report = container.report_service.build_range_report(start, end)
            overall = asdict(report.overall)
            overall["start"], overall["end"] = raw_start, raw_end
            return jsonify(
                {
                    "success": True,
                    "employees": [
                        {
                            "employee_id": row.employee_id,
                            "employee_name": row.employee_name,
                            "department": row.department,
                            "stats": summary_to_dict(row.stats),
                        }
                        for row in report.employees
                    ],
                    "departments": [asdict(d) for d in report.departments],
                    "overall": overall,
                }
            )
        except Exception as e:
            return json_error(e)
