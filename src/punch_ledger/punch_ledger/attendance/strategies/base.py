from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...core.enums import AttendanceStatus
from ...departments.model import Department
from ...schedules.model import ScheduleRule


@dataclass(frozen=True)
class ClassificationInput:
    work_date: date
    employee_name: str
    department: Department
    entry_minutes: Optional[int]
    exit_minutes: Optional[int]


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    needs_schedule: bool = False

    @abstractmethod
    def decide(self, data: ClassificationInput, *, schedule: Optional[ScheduleRule], grace_minutes: int) -> StatusDecision:
        raise NotImplementedError
