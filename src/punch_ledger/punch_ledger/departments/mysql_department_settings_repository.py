from __future__ import annotations

from typing import Optional, Sequence

from ..clock.time_model import to_time
from ..core.enums import DepartmentName
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_minutes
from .model import DepartmentSchedule
from .repository import DepartmentSettingsRepository


class MySQLDepartmentSettingsRepository(DepartmentSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_model(r: dict) -> DepartmentSchedule:
        return DepartmentSchedule(
            department=DepartmentName(r["department"]),
            entry_minutes=mysql_time_to_minutes(r["entry_time"]),
            exit_minutes=mysql_time_to_minutes(r["exit_time"]),
        )

    def get_department_schedule(self, department: DepartmentName) -> Optional[DepartmentSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department, entry_time, exit_time
                FROM department_settings
                WHERE department=%s
                """,
                (department.value,),
            )
            r = fetchone(cur)
            return self._to_model(r) if r else None

    def set_department_schedule(self, schedule: DepartmentSchedule) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO department_settings(department, entry_time, exit_time)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE entry_time=VALUES(entry_time), exit_time=VALUES(exit_time)
                """,
                (schedule.department.value, to_time(schedule.entry_minutes), to_time(schedule.exit_minutes)),
            )

    def list_all(self) -> Sequence[DepartmentSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department, entry_time, exit_time FROM department_settings ORDER BY department")
            return [self._to_model(r) for r in fetchall(cur)]
