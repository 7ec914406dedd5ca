from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_employee(self, employee_name: str, since: Optional[date] = None) -> Sequence[AttendanceRecord]:
        """Records whose employee name matches case-insensitively, oldest first."""

        raise NotImplementedError

    def find_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, records: Sequence[AttendanceRecord]) -> int:
        """Insert or replace by (employee_id, employee_name, work_date). Returns rows written."""

        raise NotImplementedError

    def delete_by_date(self, work_date: date) -> int:
        raise NotImplementedError
