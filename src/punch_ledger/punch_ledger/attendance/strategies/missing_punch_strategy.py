from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...schedules.model import ScheduleRule
from .base import ClassificationInput, ClassificationStrategy, StatusDecision


class MissingPunchStrategy(ClassificationStrategy):
    """Entry or exit punch absent."""

    def decide(self, data: ClassificationInput, *, schedule: Optional[ScheduleRule], grace_minutes: int) -> StatusDecision:
        note = "No entry punch" if data.entry_minutes is None else "No exit punch"
        return StatusDecision(status=AttendanceStatus.MISSING_CHECKOUT, note=note)
