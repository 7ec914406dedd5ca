from __future__ import annotations

from typing import Optional

from ...clock.time_model import crosses_midnight, span_minutes
from ...core.constants import LESS_HOURS_GRACE_FACTOR, MINUTES_PER_DAY
from ...core.enums import AttendanceStatus
from ...schedules.model import ScheduleRule
from .base import ClassificationInput, ClassificationStrategy, StatusDecision


def _signed_offset(minutes: int) -> int:
    """Fold a clock difference into [-720, 720) so comparisons stay inside one shift window."""
    half = MINUTES_PER_DAY // 2
    return ((minutes + half) % MINUTES_PER_DAY) - half


class ScheduledShiftStrategy(ClassificationStrategy):
    """Compare a complete entry/exit pair against the expected schedule.

    Night schedules (expected exit before expected entry) measure lateness and
    earliness with wrap-around offsets. On day schedules an employee whose own
    exit falls after midnight is treated as leaving on the following day.
    """

    needs_schedule = True

    def __init__(self, less_hours_factor: int = LESS_HOURS_GRACE_FACTOR):
        self._less_hours_factor = int(less_hours_factor)

    def decide(self, data: ClassificationInput, *, schedule: Optional[ScheduleRule], grace_minutes: int) -> StatusDecision:
        if schedule is None:
            raise ValueError("ScheduledShiftStrategy requires a schedule")

        entry = int(data.entry_minutes)
        exit_ = int(data.exit_minutes)
        employee_crosses = crosses_midnight(entry, exit_)

        if schedule.crosses_midnight:
            late_by = _signed_offset(entry - schedule.entry_minutes)
            early_by = _signed_offset(schedule.exit_minutes - exit_)
        else:
            late_by = entry - schedule.entry_minutes
            effective_exit = exit_ + MINUTES_PER_DAY if employee_crosses else exit_
            early_by = schedule.exit_minutes - effective_exit

        if late_by > grace_minutes:
            return StatusDecision(status=AttendanceStatus.LATE_ENTRY, note=f"Late by {late_by} min")

        if early_by > grace_minutes:
            return StatusDecision(status=AttendanceStatus.EARLY_EXIT, note=f"Left {early_by} min early")

        expected = schedule.expected_minutes
        actual = span_minutes(entry, exit_)
        if actual < expected - self._less_hours_factor * grace_minutes:
            return StatusDecision(status=AttendanceStatus.LESS_HOURS, note=f"Short by {expected - actual} min")

        return StatusDecision(status=AttendanceStatus.ON_TIME)
