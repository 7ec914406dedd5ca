from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import ScheduleRule
from .base import ClassificationInput, ClassificationStrategy, StatusDecision


class SundayOvertimeStrategy(ClassificationStrategy):
    """Any Sunday attendance is overtime, whatever the hours."""

    def decide(self, data: ClassificationInput, *, schedule: Optional[ScheduleRule], grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.OVERTIME, note="Sunday")
