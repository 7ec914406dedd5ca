from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.classifier import StatusClassifier
from .attendance.factory import ClassificationStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_GRACE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_settings_repository import MySQLDepartmentSettingsRepository
from .departments.repository import DepartmentSettingsRepository
from .departments.service import DepartmentSettingsService
from .schedules.model import RosterConfig
from .schedules.resolver import ScheduleResolver
from .stats.aggregator import StatsAggregator
from .stats.service import EmployeeStatsService, ReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    department_settings_repo: DepartmentSettingsRepository

    resolver: ScheduleResolver
    classifier: StatusClassifier
    aggregator: StatsAggregator

    attendance_service: AttendanceService
    department_settings_service: DepartmentSettingsService
    employee_stats_service: EmployeeStatsService
    report_service: ReportService


def wire(
    attendance_repo: AttendanceRepository,
    department_settings_repo: DepartmentSettingsRepository,
    *,
    roster: Optional[RosterConfig] = None,
    grace_minutes: int = DEFAULT_GRACE_MINUTES,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""

    resolver = ScheduleResolver(roster)
    classifier = StatusClassifier(
        resolver,
        strategy_factory=ClassificationStrategyFactory(),
        grace_minutes=grace_minutes,
    )
    aggregator = StatsAggregator(resolver)

    return Container(
        attendance_repo=attendance_repo,
        department_settings_repo=department_settings_repo,
        resolver=resolver,
        classifier=classifier,
        aggregator=aggregator,
        attendance_service=AttendanceService(attendance_repo, department_settings_repo, classifier),
        department_settings_service=DepartmentSettingsService(department_settings_repo),
        employee_stats_service=EmployeeStatsService(attendance_repo, department_settings_repo, aggregator),
        report_service=ReportService(attendance_repo, department_settings_repo, aggregator),
    )


def build_container(*, db_config: Mapping[str, Any], settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire(
        MySQLAttendanceRepository(conn),
        MySQLDepartmentSettingsRepository(conn),
        roster=RosterConfig.from_settings(settings) if settings is not None else None,
        grace_minutes=int(getattr(settings, "GRACE_MINUTES", DEFAULT_GRACE_MINUTES)),
    )
