from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern): hours a record contributes to totals."""

    @abstractmethod
    def worked_hours(self, record: AttendanceRecord) -> float:
        raise NotImplementedError
