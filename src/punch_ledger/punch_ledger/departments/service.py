from __future__ import annotations

import logging
from typing import List, Optional

from ..clock.time_model import parse_clock_time
from ..common.validators import require_non_empty
from ..core.enums import DepartmentName
from ..core.exceptions import ValidationError
from ..schedules.resolver import ADMINISTRATION_RULE, STANDARD_RULE
from .model import DepartmentSchedule
from .repository import DepartmentSettingsRepository

logger = logging.getLogger(__name__)


def default_schedule(department: DepartmentName) -> DepartmentSchedule:
    rule = ADMINISTRATION_RULE if department == DepartmentName.ADMINISTRATION else STANDARD_RULE
    return DepartmentSchedule(department, rule.entry_minutes, rule.exit_minutes)


class DepartmentSettingsService:
    def __init__(self, settings: DepartmentSettingsRepository):
        self._settings = settings

    @staticmethod
    def _department(value: str) -> DepartmentName:
        text = require_non_empty(value, "department").lower()
        try:
            return DepartmentName(text)
        except ValueError:
            raise ValidationError(f"Unknown department: {value}") from None

    @staticmethod
    def _clock(value: Optional[str], field_name: str) -> int:
        text = require_non_empty(value, field_name)
        try:
            return parse_clock_time(text)
        except ValueError as e:
            raise ValidationError(f"{field_name}: {e}") from e

    def list_settings(self) -> List[DepartmentSchedule]:
        """One schedule per department: stored override, else the default."""

        stored = {s.department: s for s in self._settings.list_all()}
        return [stored.get(d, default_schedule(d)) for d in DepartmentName]

    def get_settings(self, department: str) -> DepartmentSchedule:
        dept = self._department(department)
        return self._settings.get_department_schedule(dept) or default_schedule(dept)

    def update_settings(self, department: str, *, entry: Optional[str], exit: Optional[str]) -> DepartmentSchedule:
        dept = self._department(department)
        schedule = DepartmentSchedule(dept, self._clock(entry, "entry"), self._clock(exit, "exit"))
        if schedule.entry_minutes == schedule.exit_minutes:
            raise ValidationError("entry and exit must differ")

        self._settings.set_department_schedule(schedule)
        if dept == DepartmentName.ADMINISTRATION:
            logger.info("Stored administration schedule; the fixed administration schedule still applies")
        return schedule
