from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

import config.testing as testing_settings
from punch_ledger.attendance.classifier import StatusClassifier
from punch_ledger.attendance.model import AttendanceRecord
from punch_ledger.container import wire
from punch_ledger.core.enums import DepartmentName
from punch_ledger.departments.model import DepartmentSchedule
from punch_ledger.schedules.model import RosterConfig
from punch_ledger.schedules.resolver import ScheduleResolver

MONDAY = date(2025, 5, 12)
SUNDAY = date(2025, 5, 18)


class InMemoryAttendance:
    def __init__(self, records=()):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.deleted_dates: list[date] = []
        self.upsert(list(records))

    @staticmethod
    def _key(r: AttendanceRecord):
        return (r.employee_id, r.employee_name.casefold(), r.work_date)

    def _sorted(self, items):
        return sorted(items, key=lambda r: (r.work_date, r.employee_name))

    def find_by_date(self, work_date: date):
        return self._sorted(r for r in self._rows.values() if r.work_date == work_date)

    def find_by_employee(self, employee_name: str, since: Optional[date] = None):
        name = employee_name.strip().casefold()
        return self._sorted(
            r
            for r in self._rows.values()
            if r.employee_name.casefold() == name and (since is None or r.work_date >= since)
        )

    def find_range(self, start: date, end: date):
        return self._sorted(r for r in self._rows.values() if start <= r.work_date <= end)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._rows.get(record_id)

    def upsert(self, records) -> int:
        for r in records:
            rid = r.record_id if r.record_id in self._rows else None
            if rid is None:
                rid = next((k for k, v in self._rows.items() if self._key(v) == self._key(r)), None)
            if rid is None:
                self._id += 1
                rid = self._id
            self._rows[rid] = replace(r, record_id=rid)
        return len(records)

    def delete_by_date(self, work_date: date) -> int:
        self.deleted_dates.append(work_date)
        doomed = [k for k, v in self._rows.items() if v.work_date == work_date]
        for k in doomed:
            del self._rows[k]
        return len(doomed)


class InMemoryDepartmentSettings:
    def __init__(self, schedules=()):
        self._by_dept: dict[DepartmentName, DepartmentSchedule] = {s.department: s for s in schedules}

    def get_department_schedule(self, department: DepartmentName) -> Optional[DepartmentSchedule]:
        return self._by_dept.get(department)

    def set_department_schedule(self, schedule: DepartmentSchedule) -> None:
        self._by_dept[schedule.department] = schedule

    def list_all(self):
        return list(self._by_dept.values())


@pytest.fixture
def roster() -> RosterConfig:
    return RosterConfig.from_settings(testing_settings)


@pytest.fixture
def resolver(roster) -> ScheduleResolver:
    return ScheduleResolver(roster)


@pytest.fixture
def classifier(resolver) -> StatusClassifier:
    return StatusClassifier(resolver)


@pytest.fixture
def today() -> date:
    return date(2025, 5, 18)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def settings_repo() -> InMemoryDepartmentSettings:
    return InMemoryDepartmentSettings()


@pytest.fixture
def container(attendance_repo, settings_repo, roster):
    return wire(attendance_repo, settings_repo, roster=roster)
