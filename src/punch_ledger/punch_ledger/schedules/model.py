from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from ..clock.time_model import crosses_midnight, span_minutes
from ..core.enums import DepartmentName, ProductionCategory
from ..departments.model import OTHERS, Department, FlatDepartment, ProductionDepartment


@dataclass(frozen=True)
class ScheduleRule:
    """Expected entry/exit (minutes since midnight) and expected daily hours."""

    entry_minutes: int
    exit_minutes: int
    expected_hours: float
    source: str = "standard"

    @property
    def crosses_midnight(self) -> bool:
        return crosses_midnight(self.entry_minutes, self.exit_minutes)

    @property
    def expected_minutes(self) -> int:
        return span_minutes(self.entry_minutes, self.exit_minutes)


@dataclass(frozen=True)
class ProductionAssignment:
    sub_department: Optional[str] = None
    category: Optional[ProductionCategory] = None


def _normalize_name(name: str) -> str:
    return " ".join((name or "").lower().split())


@dataclass(frozen=True)
class RosterConfig:
    """Who works where.

    Roster entries are lower-case name fragments; an employee matches when the
    fragment occurs anywhere in their normalized name.
    """

    department_rosters: Mapping[DepartmentName, Tuple[str, ...]] = field(default_factory=dict)
    production_roster: Mapping[str, ProductionAssignment] = field(default_factory=dict)
    alternate_schedule_roster: FrozenSet[str] = frozenset()

    @classmethod
    def from_settings(cls, settings: Any) -> "RosterConfig":
        rosters = {
            DepartmentName(dept): tuple(_normalize_name(n) for n in names)
            for dept, names in (getattr(settings, "DEPARTMENT_ROSTERS", None) or {}).items()
        }
        production = {}
        for fragment, assignment in (getattr(settings, "PRODUCTION_ROSTER", None) or {}).items():
            category = assignment.get("category")
            production[_normalize_name(fragment)] = ProductionAssignment(
                sub_department=assignment.get("sub_department"),
                category=ProductionCategory(category) if category else None,
            )
        alternate = frozenset(_normalize_name(n) for n in (getattr(settings, "ALTERNATE_SCHEDULE_ROSTER", None) or ()))
        return cls(department_rosters=rosters, production_roster=production, alternate_schedule_roster=alternate)

    def department_for_employee(self, employee_name: str) -> Department:
        name = _normalize_name(employee_name)
        for fragment, assignment in self.production_roster.items():
            if fragment and fragment in name:
                return ProductionDepartment(assignment.sub_department, assignment.category)

        for dept in DepartmentName:
            for fragment in self.department_rosters.get(dept, ()):
                if fragment and fragment in name:
                    if dept == DepartmentName.PRODUCTION:
                        return ProductionDepartment()
                    return FlatDepartment(dept)
        return OTHERS

    def is_alternate_schedule(self, employee_name: str) -> bool:
        name = _normalize_name(employee_name)
        return any(fragment and fragment in name for fragment in self.alternate_schedule_roster)
