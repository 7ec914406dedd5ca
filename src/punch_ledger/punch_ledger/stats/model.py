from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class LongestOvertimeDay:
    work_date: date
    hours: float


@dataclass(frozen=True)
class EmployeeStatsSummary:
    """Aggregate over one employee's records in a date window. Hours are rounded to 0.1."""

    total_present: int = 0
    total_working_hours: float = 0.0
    average_daily_hours: float = 0.0
    late_entries: int = 0
    early_exits: int = 0
    expected_hours: float = 0.0
    shortfall_hours: float = 0.0
    overtime_hours: float = 0.0
    sunday_overtime_hours: float = 0.0
    regular_overtime_hours: float = 0.0
    sundays_worked: int = 0
    longest_overtime_day: Optional[LongestOvertimeDay] = None
    perfect_attendance_days: int = 0
    most_frequent_status: Optional[AttendanceStatus] = None
    first_attendance_date: Optional[date] = None
    last_attendance_date: Optional[date] = None


@dataclass(frozen=True)
class EmployeeReportRow:
    employee_id: str
    employee_name: str
    department: str
    stats: EmployeeStatsSummary


@dataclass(frozen=True)
class DepartmentSummary:
    department: str
    total_employees: int
    total_working_hours: float
    total_overtime_hours: float
    total_shortfall_hours: float
    total_late_entries: int
    total_early_exits: int
    average_working_hours: float


@dataclass(frozen=True)
class OverallSummary:
    start: date
    end: date
    total_employees: int = 0
    total_records: int = 0
    total_working_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_shortfall_hours: float = 0.0
    total_late_entries: int = 0
    total_early_exits: int = 0
    average_working_hours: float = 0.0
    average_overtime_hours: float = 0.0
    average_shortfall_hours: float = 0.0


@dataclass(frozen=True)
class RangeReport:
    employees: List[EmployeeReportRow] = field(default_factory=list)
    departments: List[DepartmentSummary] = field(default_factory=list)
    overall: Optional[OverallSummary] = None
