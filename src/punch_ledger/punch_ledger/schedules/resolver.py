"""Expected-schedule resolution.

Precedence, first match wins:

1. administration department: fixed administrative schedule;
2. employee on the alternate-schedule roster: alternate schedule;
3. stored department-settings override for the employee's department;
4. standard long shift.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from ..clock.time_model import parse_clock_time, span_minutes
from ..common.validators import require_non_empty
from ..core.constants import ADMINISTRATION_SCHEDULE, ALTERNATE_SCHEDULE, STANDARD_SCHEDULE
from ..core.enums import DepartmentName
from ..departments.model import Department, DepartmentSchedule, parse_department
from .model import RosterConfig, ScheduleRule

logger = logging.getLogger(__name__)


def _fixed_rule(values: tuple, source: str) -> ScheduleRule:
    entry, exit_, hours = values
    return ScheduleRule(parse_clock_time(entry), parse_clock_time(exit_), float(hours), source)


ADMINISTRATION_RULE = _fixed_rule(ADMINISTRATION_SCHEDULE, "administration")
ALTERNATE_RULE = _fixed_rule(ALTERNATE_SCHEDULE, "alternate")
STANDARD_RULE = _fixed_rule(STANDARD_SCHEDULE, "standard")


class ScheduleResolver:
    """Pure resolver of (employee, department) -> ScheduleRule.

    Department overrides are a snapshot handed in at construction time; the
    resolver never reads the store itself.
    """

    def __init__(
        self,
        roster: Optional[RosterConfig] = None,
        overrides: Optional[Iterable[DepartmentSchedule]] = None,
    ):
        self._roster = roster or RosterConfig()
        self._overrides: Mapping[DepartmentName, DepartmentSchedule] = {
            o.department: o for o in (overrides or ())
        }

    @property
    def roster(self) -> RosterConfig:
        return self._roster

    def with_overrides(self, overrides: Iterable[DepartmentSchedule]) -> "ScheduleResolver":
        return ScheduleResolver(self._roster, overrides)

    def department_for_employee(self, employee_name: str) -> Department:
        return self._roster.department_for_employee(employee_name)

    def resolve(
        self,
        employee_name: str,
        department: Union[Department, DepartmentName, str, None] = None,
    ) -> ScheduleRule:
        name = require_non_empty(employee_name, "employee_name")
        dept = self.department_for_employee(name) if department is None else parse_department(department)

        if dept.name == DepartmentName.ADMINISTRATION:
            return ADMINISTRATION_RULE

        if self._roster.is_alternate_schedule(name):
            return ALTERNATE_RULE

        override = self._overrides.get(dept.name)
        if override is not None:
            minutes = span_minutes(override.entry_minutes, override.exit_minutes)
            if minutes > 0:
                return ScheduleRule(
                    override.entry_minutes,
                    override.exit_minutes,
                    round(minutes / 60, 2),
                    "department",
                )
            logger.warning("Ignoring zero-length schedule override for %s", dept.name.value)

        return STANDARD_RULE
