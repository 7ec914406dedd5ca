from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import DepartmentName
from .model import DepartmentSchedule


class DepartmentSettingsRepository(Protocol):
    """Department-level schedule overrides, keyed by department name."""

    def get_department_schedule(self, department: DepartmentName) -> Optional[DepartmentSchedule]:
        raise NotImplementedError

    def set_department_schedule(self, schedule: DepartmentSchedule) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[DepartmentSchedule]:
        raise NotImplementedError
