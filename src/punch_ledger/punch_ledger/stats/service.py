from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Dict, List, Mapping, Optional, Tuple

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.constants import PERIOD_WINDOWS
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.repository import DepartmentSettingsRepository
from .aggregator import StatsAggregator
from .model import (
    DepartmentSummary,
    EmployeeReportRow,
    EmployeeStatsSummary,
    OverallSummary,
    RangeReport,
)


def summary_to_dict(s: EmployeeStatsSummary) -> dict:
    data = asdict(s)
    data["most_frequent_status"] = s.most_frequent_status.value if s.most_frequent_status else None
    data["first_attendance_date"] = s.first_attendance_date.isoformat() if s.first_attendance_date else None
    data["last_attendance_date"] = s.last_attendance_date.isoformat() if s.last_attendance_date else None
    if s.longest_overtime_day:
        data["longest_overtime_day"] = {
            "date": s.longest_overtime_day.work_date.isoformat(),
            "hours": s.longest_overtime_day.hours,
        }
    return data


class _StatsBase:
    def __init__(
        self,
        attendance: AttendanceRepository,
        settings: DepartmentSettingsRepository,
        aggregator: StatsAggregator,
    ):
        self._attendance = attendance
        self._settings = settings
        self._aggregator = aggregator

    def _current_aggregator(self) -> StatsAggregator:
        resolver = self._aggregator.resolver.with_overrides(self._settings.list_all())
        return self._aggregator.with_resolver(resolver)


class EmployeeStatsService(_StatsBase):
    def stats_by_period(
        self,
        employee_name: str,
        *,
        today: Optional[date] = None,
        periods: Mapping[str, Optional[int]] = PERIOD_WINDOWS,
    ) -> Dict[str, EmployeeStatsSummary]:
        """Summaries for each named window (``7days``, ``30days``, ``allTime``)."""

        name = require_non_empty(employee_name, "employee_name")
        records = self._attendance.find_by_employee(name)
        if not records:
            raise NotFoundError(f"No attendance records for {name}")

        today = today or today_local()
        aggregator = self._current_aggregator()
        return {
            period: aggregator.aggregate(records, window_days=days, today=today)
            for period, days in periods.items()
        }


class ReportService(_StatsBase):
    def build_range_report(self, start: date, end: date) -> RangeReport:
        if end < start:
            raise ValidationError("end date must not be before start date")

        records = self._attendance.find_range(start, end)
        aggregator = self._current_aggregator()

        by_employee: Dict[Tuple[str, str], List[AttendanceRecord]] = {}
        for r in records:
            key = (r.employee_id, " ".join(r.employee_name.split()).casefold())
            by_employee.setdefault(key, []).append(r)

        rows: List[EmployeeReportRow] = []
        for group in by_employee.values():
            latest = max(group, key=lambda r: r.work_date)
            rows.append(
                EmployeeReportRow(
                    employee_id=latest.employee_id,
                    employee_name=latest.employee_name,
                    department=latest.department.name.value,
                    stats=aggregator.aggregate(group, from_date=start, to_date=end),
                )
            )
        rows.sort(key=lambda row: row.stats.total_working_hours, reverse=True)

        return RangeReport(
            employees=rows,
            departments=self._department_summaries(rows),
            overall=self._overall(rows, start=start, end=end, total_records=len(records)),
        )

    @staticmethod
    def _department_summaries(rows: List[EmployeeReportRow]) -> List[DepartmentSummary]:
        grouped: Dict[str, List[EmployeeReportRow]] = {}
        for row in rows:
            grouped.setdefault(row.department, []).append(row)

        out: List[DepartmentSummary] = []
        for department, members in grouped.items():
            hours = sum(m.stats.total_working_hours for m in members)
            out.append(
                DepartmentSummary(
                    department=department,
                    total_employees=len(members),
                    total_working_hours=round(hours, 1),
                    total_overtime_hours=round(sum(m.stats.overtime_hours for m in members), 1),
                    total_shortfall_hours=round(sum(m.stats.shortfall_hours for m in members), 1),
                    total_late_entries=sum(m.stats.late_entries for m in members),
                    total_early_exits=sum(m.stats.early_exits for m in members),
                    average_working_hours=round(hours / len(members), 1),
                )
            )
        out.sort(key=lambda d: d.department)
        return out

    @staticmethod
    def _overall(rows: List[EmployeeReportRow], *, start: date, end: date, total_records: int) -> OverallSummary:
        if not rows:
            return OverallSummary(start=start, end=end, total_records=total_records)

        n = len(rows)
        hours = sum(r.stats.total_working_hours for r in rows)
        overtime = sum(r.stats.overtime_hours for r in rows)
        shortfall = sum(r.stats.shortfall_hours for r in rows)
        return OverallSummary(
            start=start,
            end=end,
            total_employees=n,
            total_records=total_records,
            total_working_hours=round(hours, 1),
            total_overtime_hours=round(overtime, 1),
            total_shortfall_hours=round(shortfall, 1),
            total_late_entries=sum(r.stats.late_entries for r in rows),
            total_early_exits=sum(r.stats.early_exits for r in rows),
            average_working_hours=round(hours / n, 1),
            average_overtime_hours=round(overtime / n, 1),
            average_shortfall_hours=round(shortfall / n, 1),
        )
