from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import is_sunday
from ..core.constants import LESS_HOURS_GRACE_FACTOR
from .strategies.base import ClassificationInput, ClassificationStrategy
from .strategies.missing_punch_strategy import MissingPunchStrategy
from .strategies.shift_strategy import ScheduledShiftStrategy
from .strategies.sunday_strategy import SundayOvertimeStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the strategy for a record, in rule order.

    Sunday wins over everything, then a missing punch; only complete weekday
    pairs are compared against a schedule.
    """

    less_hours_factor: int = LESS_HOURS_GRACE_FACTOR

    def for_record(self, data: ClassificationInput) -> ClassificationStrategy:
        if is_sunday(data.work_date):
            return SundayOvertimeStrategy()
        if data.entry_minutes is None or data.exit_minutes is None:
            return MissingPunchStrategy()
        return ScheduledShiftStrategy(self.less_hours_factor)
