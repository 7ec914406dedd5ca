from __future__ import annotations

from .base import WorkedHoursCalculator
from ...attendance.model import AttendanceRecord
from ...core.enums import AttendanceStatus


class StandardHoursCalculator(WorkedHoursCalculator):
    """Standard rule: recorded hours, except a missing checkout counts as 0."""

    def worked_hours(self, record: AttendanceRecord) -> float:
        if record.status == AttendanceStatus.MISSING_CHECKOUT:
            return 0.0
        return max(float(record.total_hours or 0.0), 0.0)
