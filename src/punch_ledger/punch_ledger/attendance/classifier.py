from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..clock.time_model import elapsed_hours
from ..core.constants import DEFAULT_GRACE_MINUTES
from ..schedules.model import ScheduleRule
from ..schedules.resolver import ScheduleResolver
from .factory import ClassificationStrategyFactory
from .model import AttendanceRecord
from .strategies.base import ClassificationInput, StatusDecision


class StatusClassifier:
    """Derives status and hours for attendance records. Holds no mutable state."""

    def __init__(
        self,
        resolver: ScheduleResolver,
        *,
        strategy_factory: Optional[ClassificationStrategyFactory] = None,
        grace_minutes: int = DEFAULT_GRACE_MINUTES,
    ):
        self._resolver = resolver
        self._factory = strategy_factory or ClassificationStrategyFactory()
        self._grace_minutes = int(grace_minutes)

    @property
    def resolver(self) -> ScheduleResolver:
        return self._resolver

    def with_resolver(self, resolver: ScheduleResolver) -> "StatusClassifier":
        return StatusClassifier(resolver, strategy_factory=self._factory, grace_minutes=self._grace_minutes)

    def classify(self, data: ClassificationInput, *, schedule: Optional[ScheduleRule] = None) -> StatusDecision:
        strategy = self._factory.for_record(data)
        if strategy.needs_schedule and schedule is None:
            schedule = self._resolver.resolve(data.employee_name, data.department)
        return strategy.decide(data, schedule=schedule, grace_minutes=self._grace_minutes)

    def recompute(self, record: AttendanceRecord, *, schedule: Optional[ScheduleRule] = None) -> AttendanceRecord:
        """Return a copy of ``record`` with total hours and status re-derived."""

        total_hours = 0.0
        if record.has_both_punches:
            total_hours = elapsed_hours(record.entry_minutes, record.exit_minutes)

        decision = self.classify(
            ClassificationInput(
                work_date=record.work_date,
                employee_name=record.employee_name,
                department=record.department,
                entry_minutes=record.entry_minutes,
                exit_minutes=record.exit_minutes,
            ),
            schedule=schedule,
        )
        return replace(record, total_hours=total_hours, status=decision.status)
