from datetime import date

import pytest

from punch_ledger.attendance.classifier import StatusClassifier
from punch_ledger.attendance.factory import ClassificationStrategyFactory
from punch_ledger.attendance.model import AttendanceRecord
from punch_ledger.attendance.strategies.base import ClassificationInput
from punch_ledger.core.enums import AttendanceStatus, DepartmentName
from punch_ledger.departments.model import DepartmentSchedule, FlatDepartment
from punch_ledger.schedules.model import ScheduleRule

MONDAY = date(2025, 5, 12)
SUNDAY = date(2025, 5, 18)

ADMIN = FlatDepartment(DepartmentName.ADMINISTRATION)
PACKING = FlatDepartment(DepartmentName.PACKING)


def _status(classifier, entry, exit_, *, name="Pat Packer", department=PACKING, day=MONDAY, schedule=None):
    data = ClassificationInput(
        work_date=day, employee_name=name, department=department, entry_minutes=entry, exit_minutes=exit_
    )
    return classifier.classify(data, schedule=schedule).status


def test_administration_twenty_minutes_late(classifier):
    assert _status(classifier, 560, 1080, name="Ada Admin", department=ADMIN) == AttendanceStatus.LATE_ENTRY
    # Lateness wins regardless of exit or hours.
    assert _status(classifier, 560, 1300, name="Ada Admin", department=ADMIN) == AttendanceStatus.LATE_ENTRY


def test_within_grace_is_on_time(classifier):
    assert _status(classifier, 555, 1080, name="Ada Admin", department=ADMIN) == AttendanceStatus.ON_TIME
    assert _status(classifier, 480, 1185) == AttendanceStatus.ON_TIME


def test_early_exit(classifier):
    assert _status(classifier, 480, 1170) == AttendanceStatus.EARLY_EXIT


@pytest.mark.parametrize("entry,exit_", [(None, 1200), (480, None), (None, None)])
def test_missing_punch(classifier, entry, exit_):
    assert _status(classifier, entry, exit_) == AttendanceStatus.MISSING_CHECKOUT


def test_sunday_is_always_overtime(classifier):
    assert _status(classifier, 600, 720, day=SUNDAY) == AttendanceStatus.OVERTIME
    assert _status(classifier, 600, None, day=SUNDAY) == AttendanceStatus.OVERTIME


def test_night_schedule_wraps_around_midnight(classifier):
    night = classifier.with_resolver(
        classifier.resolver.with_overrides([DepartmentSchedule(DepartmentName.PACKING, 1080, 360)])
    )

    assert _status(night, 1070, 370) == AttendanceStatus.ON_TIME
    assert _status(night, 1110, 360) == AttendanceStatus.LATE_ENTRY
    assert _status(night, 1080, 330) == AttendanceStatus.EARLY_EXIT


def test_day_schedule_exit_after_midnight_is_not_early(classifier):
    assert _status(classifier, 480, 30) == AttendanceStatus.ON_TIME


def test_explicit_schedule_is_used(classifier):
    office = ScheduleRule(600, 1080, 8.0, "custom")

    assert _status(classifier, 600, 1080, schedule=office) == AttendanceStatus.ON_TIME
    assert _status(classifier, 480, 1200, schedule=office) == AttendanceStatus.ON_TIME
    assert _status(classifier, 630, 1080, schedule=office) == AttendanceStatus.LATE_ENTRY


def test_recompute_derives_hours_and_is_idempotent(classifier):
    record = AttendanceRecord(
        employee_id="7",
        employee_name="Pat Packer",
        work_date=MONDAY,
        department=PACKING,
        entry_minutes=480,
        exit_minutes=30,
        total_hours=99.0,
        status=AttendanceStatus.LATE_ENTRY,
    )

    once = classifier.recompute(record)

    assert once.total_hours == 16.5
    assert once.status == AttendanceStatus.ON_TIME
    assert classifier.recompute(once) == once


def test_recompute_sunday_hours(classifier):
    record = AttendanceRecord("7", "Pat Packer", SUNDAY, PACKING, 600, 720)

    updated = classifier.recompute(record)

    assert updated.total_hours == 2.0
    assert updated.status == AttendanceStatus.OVERTIME


def test_grace_minutes_is_configurable(resolver):
    strict = StatusClassifier(resolver, grace_minutes=0)

    assert _status(strict, 481, 1200) == AttendanceStatus.LATE_ENTRY


def test_less_hours_when_shortfall_factor_is_tightened(resolver):
    # At the default factor the late and early gates always fire first.
    assert _status(StatusClassifier(resolver), 495, 1185) == AttendanceStatus.ON_TIME

    tight = StatusClassifier(resolver, strategy_factory=ClassificationStrategyFactory(less_hours_factor=1))

    # 15 min late and 15 min early: within grace, but 30 min short of 12h.
    assert _status(tight, 495, 1185) == AttendanceStatus.LESS_HOURS
    assert _status(tight, 485, 1195) == AttendanceStatus.ON_TIME
