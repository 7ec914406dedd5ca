from __future__ import annotations

import io
from datetime import date

import pytest
from flask import Flask

from punch_ledger.attendance.controller import register as register_attendance
from punch_ledger.departments.controller import register as register_departments
from punch_ledger.punches.model import RawPunch
from punch_ledger.stats.controller import register as register_stats


@pytest.fixture
def client(container):
    app = Flask(__name__)
    app.config["TESTING"] = True
    register_attendance(app, container)
    register_stats(app, container)
    register_departments(app, container)
    return app.test_client()


def _seed(container):
    punches = [
        RawPunch("7", "Pat Packer", "08:00"),
        RawPunch("7", "Pat Packer", "20:00"),
        RawPunch("2", "Sam Super", "08:30"),
    ]
    container.attendance_service.import_punches(punches, date(2025, 5, 12))


def test_import_upload(client):
    csv = b"AC.No.,Name,Time\n7,Pat Packer,08:00\n7,Pat Packer,20:00\n"

    resp = client.post(
        "/api/attendance/import",
        data={"file": (io.BytesIO(csv), "attendance_12052025.csv")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["date"] == "2025-05-12"
    assert body["records"][0]["status"] == "onTime"


def test_import_without_file_is_bad_request(client):
    resp = client.post("/api/attendance/import", data={}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_day_listing_with_counts_and_filter(client, container):
    _seed(container)

    body = client.get("/api/attendance/2025-05-12?status=missingCheckout").get_json()

    assert body["counts"]["onTime"] == 1
    assert body["counts"]["missingCheckout"] == 1
    assert [r["employee_name"] for r in body["records"]] == ["Sam Super"]


def test_bad_date_is_bad_request(client):
    assert client.get("/api/attendance/12-05-2025").status_code == 400


def test_patch_record(client, container, attendance_repo):
    _seed(container)
    sam = [r for r in attendance_repo.find_by_date(date(2025, 5, 12)) if r.employee_name == "Sam Super"][0]

    resp = client.patch(f"/api/attendance/records/{sam.record_id}", json={"exit": "08:00 PM"})

    assert resp.status_code == 200
    assert resp.get_json()["record"]["status"] == "lateEntry"
    assert client.patch("/api/attendance/records/999", json={"exit": "08:00 PM"}).status_code == 404


def test_delete_day(client, container):
    _seed(container)

    assert client.delete("/api/attendance/2025-05-12").get_json()["deleted"] == 2
    assert client.get("/api/attendance/2025-05-12").get_json()["records"] == []


def test_employee_stats(client, container):
    _seed(container)

    resp = client.get("/api/employees/Pat%20Packer/stats")

    assert resp.status_code == 200
    periods = resp.get_json()["periods"]
    assert periods["allTime"]["total_working_hours"] == 12.0
    assert client.get("/api/employees/Nobody/stats").status_code == 404


def test_range_report(client, container):
    _seed(container)

    body = client.get("/api/reports?start=2025-05-12&end=2025-05-12").get_json()

    assert body["overall"]["total_employees"] == 2
    assert body["overall"]["start"] == "2025-05-12"
    assert body["employees"][0]["employee_name"] == "Pat Packer"
    assert client.get("/api/reports?start=2025-05-12").status_code == 400


def test_department_settings_routes(client):
    resp = client.put("/api/departments/settings/packing", json={"entry": "18:00", "exit": "06:00"})

    assert resp.status_code == 200
    assert resp.get_json()["setting"] == {"department": "packing", "entry": "06:00 PM", "exit": "06:00 AM"}

    settings = client.get("/api/departments/settings").get_json()["settings"]
    assert {"department": "packing", "entry": "06:00 PM", "exit": "06:00 AM"} in settings
    assert client.put("/api/departments/settings/packing", json={"entry": "x"}).status_code == 400
