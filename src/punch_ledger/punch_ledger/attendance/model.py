from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..departments.model import Department


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance on one calendar date.

    ``total_hours`` and ``status`` are derived values; after editing entry or
    exit, pass the record through ``StatusClassifier.recompute``.
    """

    employee_id: str
    employee_name: str
    work_date: date
    department: Department
    entry_minutes: Optional[int]
    exit_minutes: Optional[int]
    total_hours: float = 0.0
    status: AttendanceStatus = AttendanceStatus.MISSING_CHECKOUT
    exception_label: Optional[str] = None
    operation_code: Optional[str] = None
    record_id: Optional[int] = None

    @property
    def has_both_punches(self) -> bool:
        return self.entry_minutes is not None and self.exit_minutes is not None
