from __future__ import annotations

from datetime import date, timedelta

import pytest

from punch_ledger.core.enums import AttendanceStatus, DepartmentName
from punch_ledger.core.exceptions import NotFoundError, ValidationError
from punch_ledger.departments.model import DepartmentSchedule
from punch_ledger.punches.model import RawPunch
from punch_ledger.stats.service import summary_to_dict

MONDAY = date(2025, 5, 12)
SUNDAY = date(2025, 5, 18)


def _day(container, day, *people):
    punches = []
    for emp_id, name, times in people:
        punches += [RawPunch(employee_id=emp_id, employee_name=name, timestamp=t) for t in times]
    container.attendance_service.import_punches(punches, day)


@pytest.fixture
def week(container):
    for i in range(5):
        _day(
            container,
            MONDAY + timedelta(days=i),
            ("7", "Pat Packer", ("08:00", "20:00")),
            ("1", "Ada Admin", ("09:20", "18:20")),
        )
    _day(container, SUNDAY, ("7", "Pat Packer", ("10:00", "14:00")))
    return container


def test_stats_by_period(week, today):
    periods = week.employee_stats_service.stats_by_period("pat packer", today=today + timedelta(days=20))

    assert list(periods) == ["7days", "30days", "allTime"]
    assert periods["7days"].total_present == 0
    assert periods["30days"].total_present == 5
    assert periods["allTime"].sunday_overtime_hours == 4.0
    assert periods["allTime"].overtime_hours == 4.0
    assert periods["allTime"].most_frequent_status == AttendanceStatus.ON_TIME


def test_stats_for_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.employee_stats_service.stats_by_period("Nobody Here")


def test_stats_respect_stored_department_schedule(week, settings_repo, today):
    settings_repo.set_department_schedule(DepartmentSchedule(DepartmentName.PACKING, 480, 1080))

    s = week.employee_stats_service.stats_by_period("Pat Packer", today=today)["allTime"]

    # 10h expected per weekday now, so each 12h day carries 2h of overtime.
    assert s.expected_hours == 50.0
    assert s.overtime_hours == 14.0
    assert s.regular_overtime_hours == 10.0


def test_range_report_sorted_by_hours(week):
    report = week.report_service.build_range_report(MONDAY, SUNDAY)

    assert [row.employee_name for row in report.employees] == ["Pat Packer", "Ada Admin"]
    pat, ada = report.employees
    assert pat.stats.total_working_hours == 60.0
    assert ada.stats.late_entries == 5
    assert ada.stats.total_working_hours == 45.0
    assert ada.department == "administration"


def test_range_report_rollups(week):
    report = week.report_service.build_range_report(MONDAY, SUNDAY)

    by_dept = {d.department: d for d in report.departments}
    assert set(by_dept) == {"administration", "packing"}
    assert by_dept["packing"].total_employees == 1
    assert by_dept["packing"].total_overtime_hours == 4.0
    assert by_dept["administration"].total_late_entries == 5

    overall = report.overall
    assert overall.total_employees == 2
    assert overall.total_records == 11
    assert overall.total_working_hours == 105.0
    assert overall.average_working_hours == 52.5


def test_range_report_clips_to_range(week):
    report = week.report_service.build_range_report(MONDAY, MONDAY)

    assert report.overall.total_records == 2
    assert report.employees[0].stats.total_present == 1


def test_empty_range_report(container):
    report = container.report_service.build_range_report(MONDAY, MONDAY)

    assert report.employees == []
    assert report.overall.total_employees == 0


def test_range_report_rejects_inverted_range(container):
    with pytest.raises(ValidationError):
        container.report_service.build_range_report(SUNDAY, MONDAY)


def test_summary_to_dict_is_json_ready(week, today):
    s = week.employee_stats_service.stats_by_period("Pat Packer", today=today)["allTime"]

    data = summary_to_dict(s)

    assert data["longest_overtime_day"] == {"date": "2025-05-18", "hours": 4.0}
    assert data["most_frequent_status"] == "onTime"
    assert data["first_attendance_date"] == "2025-05-12"


def test_stats_find_names_exported_with_extra_spaces(container, today):
    _day(container, MONDAY, ("7", "Pat  Packer", ("08:00", "20:00")))

    s = container.employee_stats_service.stats_by_period("Pat Packer", today=today)["allTime"]

    assert s.total_present == 1
