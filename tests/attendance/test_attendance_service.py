import io
from datetime import date

import pytest

from punch_ledger.attendance.model import AttendanceRecord
from punch_ledger.attendance.service import record_to_dict, status_counts
from punch_ledger.core.enums import AttendanceStatus, DepartmentName
from punch_ledger.core.exceptions import NotFoundError, ValidationError
from punch_ledger.departments.model import OTHERS, DepartmentSchedule
from punch_ledger.punches.model import RawPunch

MONDAY = date(2025, 5, 12)
TUESDAY = date(2025, 5, 13)


def _punches(name="Pat Packer", emp_id="7", times=("08:00", "20:00")):
    return [RawPunch(employee_id=emp_id, employee_name=name, timestamp=t) for t in times]


def test_import_replaces_the_whole_day(container, attendance_repo):
    attendance_repo.upsert([AttendanceRecord("1", "Old Timer", MONDAY, OTHERS, 480, 1200)])

    summary = container.attendance_service.import_punches(_punches(), MONDAY)

    assert summary.saved == 1
    assert attendance_repo.deleted_dates == [MONDAY]
    assert [r.employee_name for r in attendance_repo.find_by_date(MONDAY)] == ["Pat Packer"]


def test_reimport_does_not_duplicate(container, attendance_repo):
    container.attendance_service.import_punches(_punches(), MONDAY)
    container.attendance_service.import_punches(_punches(), MONDAY)

    assert len(attendance_repo.find_by_date(MONDAY)) == 1


def test_dry_run_does_not_touch_the_store(container, attendance_repo):
    summary = container.attendance_service.import_punches(_punches(), MONDAY, save=False)

    assert summary.saved == 0
    assert summary.records[0].status == AttendanceStatus.ON_TIME
    assert attendance_repo.find_by_date(MONDAY) == []


def test_import_file_takes_date_from_name(container, attendance_repo):
    csv = "AC.No.,Name,Time\n7,Pat Packer,09:05 AM\n7,Pat Packer,01:00 PM\n7,Pat Packer,06:10 PM\n,,\n"

    summary = container.attendance_service.import_file(io.StringIO(csv), "attendance_12052025.csv")

    assert summary.work_date == MONDAY
    record = attendance_repo.find_by_date(MONDAY)[0]
    assert (record.entry_minutes, record.exit_minutes) == (545, 1090)


def test_import_uses_stored_department_schedule(container, settings_repo):
    settings_repo.set_department_schedule(DepartmentSchedule(DepartmentName.PACKING, 1080, 360))
    punches = _punches(times=("05/12/2025 18:00:00", "05/13/2025 06:05:00"))

    summary = container.attendance_service.import_punches(punches, MONDAY)

    assert summary.records[0].status == AttendanceStatus.ON_TIME
    assert summary.records[0].total_hours == 12.08


def test_save_day_rejects_foreign_dates(container):
    record = AttendanceRecord("7", "Pat Packer", TUESDAY, OTHERS, 480, 1200)

    with pytest.raises(ValidationError):
        container.attendance_service.save_day(MONDAY, [record])


def test_correct_record_rederives_status(container, attendance_repo):
    container.attendance_service.import_punches(_punches(times=("08:00",)), MONDAY)
    stored = attendance_repo.find_by_date(MONDAY)[0]
    assert stored.status == AttendanceStatus.MISSING_CHECKOUT

    fixed = container.attendance_service.correct_record(stored.record_id, exit="07:30 PM")

    assert fixed.record_id == stored.record_id
    assert fixed.exit_minutes == 1170
    assert fixed.total_hours == 11.5
    assert fixed.status == AttendanceStatus.EARLY_EXIT
    assert attendance_repo.get_by_id(stored.record_id) == fixed


def test_correct_record_can_clear_exit(container, attendance_repo):
    container.attendance_service.import_punches(_punches(), MONDAY)
    stored = attendance_repo.find_by_date(MONDAY)[0]

    cleared = container.attendance_service.correct_record(stored.record_id, exit="")

    assert cleared.exit_minutes is None
    assert cleared.total_hours == 0.0
    assert cleared.status == AttendanceStatus.MISSING_CHECKOUT


def test_correct_record_errors(container, attendance_repo):
    container.attendance_service.import_punches(_punches(), MONDAY)
    stored = attendance_repo.find_by_date(MONDAY)[0]

    with pytest.raises(NotFoundError):
        container.attendance_service.correct_record(999, entry="08:00")
    with pytest.raises(ValidationError):
        container.attendance_service.correct_record(stored.record_id, entry="soon")
    with pytest.raises(ValidationError):
        container.attendance_service.correct_record(stored.record_id, entry="")


def test_delete_day(container, attendance_repo):
    container.attendance_service.import_punches(_punches(), MONDAY)

    assert container.attendance_service.delete_day(MONDAY) == 1
    assert container.attendance_service.list_for_date(MONDAY) == []


def test_status_counts_cover_every_status_in_order(container):
    summary = container.attendance_service.import_punches(
        _punches() + _punches(name="Sam Super", emp_id="2", times=("09:00",)), MONDAY, save=False
    )

    counts = status_counts(summary.records)

    assert list(counts) == list(AttendanceStatus)
    assert counts[AttendanceStatus.ON_TIME] == 1
    assert counts[AttendanceStatus.MISSING_CHECKOUT] == 1
    assert counts[AttendanceStatus.OVERTIME] == 0


def test_record_to_dict_uses_display_forms(container):
    record = container.attendance_service.import_punches(_punches(), MONDAY, save=False).records[0]

    row = record_to_dict(record)

    assert row["entry"] == "08:00 AM"
    assert row["exit"] == "08:00 PM"
    assert row["status"] == "onTime"
    assert row["status_label"] == "On Time"
    assert row["department"] == "packing"
