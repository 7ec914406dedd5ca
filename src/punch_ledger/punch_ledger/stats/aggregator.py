"""Per-employee attendance statistics over a date window.

Sunday records are kept apart from "present" days: every Sunday hour is
overtime. Overtime (including Sunday hours) is first spent cancelling any
shortfall against expected hours; only the remainder is reported.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import is_sunday, today_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..schedules.resolver import ScheduleResolver
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .model import EmployeeStatsSummary, LongestOvertimeDay


def _r1(value: float) -> float:
    return round(value + 0.0, 1)


class StatsAggregator:
    def __init__(self, resolver: ScheduleResolver, *, calculator: Optional[WorkedHoursCalculator] = None):
        self._resolver = resolver
        self._calculator = calculator or StandardHoursCalculator()

    @property
    def resolver(self) -> ScheduleResolver:
        return self._resolver

    def with_resolver(self, resolver: ScheduleResolver) -> "StatsAggregator":
        return StatsAggregator(resolver, calculator=self._calculator)

    @staticmethod
    def filter_window(
        records: Sequence[AttendanceRecord],
        *,
        window_days: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        if window_days is not None and from_date is not None:
            raise ValidationError("Pass either window_days or from_date, not both")

        start = from_date
        if window_days is not None:
            start = (today or today_local()) - timedelta(days=int(window_days))

        return [
            r
            for r in records
            if (start is None or r.work_date >= start) and (to_date is None or r.work_date <= to_date)
        ]

    def _expected_hours(self, record: AttendanceRecord) -> float:
        return self._resolver.resolve(record.employee_name, record.department).expected_hours

    def aggregate(
        self,
        records: Sequence[AttendanceRecord],
        *,
        window_days: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> EmployeeStatsSummary:
        windowed = self.filter_window(
            records, window_days=window_days, from_date=from_date, to_date=to_date, today=today
        )
        if not windowed:
            return EmployeeStatsSummary()

        sundays = [r for r in windowed if is_sunday(r.work_date)]
        present = [r for r in windowed if not is_sunday(r.work_date)]

        total_present = len(present)
        total_working = sum(self._calculator.worked_hours(r) for r in present)
        average = total_working / total_present if total_present else 0.0
        expected = sum(self._expected_hours(r) for r in present)

        sunday_overtime = sum(float(r.total_hours or 0.0) for r in sundays)

        shortfall = max(0.0, expected - total_working)
        overtime = max(0.0, total_working - expected) + sunday_overtime
        if overtime >= shortfall:
            overtime -= shortfall
            shortfall = 0.0
        else:
            shortfall -= overtime
            overtime = 0.0
        regular_overtime = max(0.0, overtime - sunday_overtime)

        longest: Optional[LongestOvertimeDay] = None
        best_excess = 0.0
        for r in windowed:
            if is_sunday(r.work_date):
                excess = float(r.total_hours or 0.0)
            else:
                excess = self._calculator.worked_hours(r) - self._expected_hours(r)
            if excess > best_excess:
                best_excess = excess
                longest = LongestOvertimeDay(work_date=r.work_date, hours=_r1(excess))

        counts: Dict[AttendanceStatus, int] = {}
        for r in windowed:
            counts[r.status] = counts.get(r.status, 0) + 1
        # max() keeps the first maximal key, so ties go to the first status seen.
        most_frequent = max(counts, key=counts.get)

        return EmployeeStatsSummary(
            total_present=total_present,
            total_working_hours=_r1(total_working),
            average_daily_hours=_r1(average),
            late_entries=sum(1 for r in present if r.status == AttendanceStatus.LATE_ENTRY),
            early_exits=sum(1 for r in present if r.status == AttendanceStatus.EARLY_EXIT),
            expected_hours=_r1(expected),
            shortfall_hours=_r1(shortfall),
            overtime_hours=_r1(overtime),
            sunday_overtime_hours=_r1(sunday_overtime),
            regular_overtime_hours=_r1(regular_overtime),
            sundays_worked=len(sundays),
            longest_overtime_day=longest,
            perfect_attendance_days=counts.get(AttendanceStatus.ON_TIME, 0),
            most_frequent_status=most_frequent,
            first_attendance_date=min(r.work_date for r in windowed),
            last_attendance_date=max(r.work_date for r in windowed),
        )
