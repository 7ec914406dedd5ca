from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from ..clock.time_model import to_time
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_minutes
from ..departments.model import parse_department
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, employee_id, employee_name, work_date, department,
    entry_time, exit_time, total_minutes, status, exception_label, operation_code
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_model(r: dict) -> AttendanceRecord:
        return AttendanceRecord(
            record_id=int(r["record_id"]),
            employee_id=r.get("employee_id") or "",
            employee_name=r["employee_name"],
            work_date=r["work_date"],
            department=parse_department(r.get("department")),
            entry_minutes=mysql_time_to_minutes(r.get("entry_time")),
            exit_minutes=mysql_time_to_minutes(r.get("exit_time")),
            total_hours=round(int(r.get("total_minutes") or 0) / 60, 2),
            status=AttendanceStatus(r["status"]),
            exception_label=r.get("exception_label"),
            operation_code=r.get("operation_code"),
        )

    def _select(self, where: str, params: tuple) -> List[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date ASC, employee_name ASC
                """,
                params,
            )
            return [self._to_model(r) for r in fetchall(cur)]

    def find_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._select("work_date=%s", (work_date,))

    def find_by_employee(self, employee_name: str, since: Optional[date] = None) -> Sequence[AttendanceRecord]:
        name = " ".join((employee_name or "").split()).lower()
        if since is None:
            return self._select("LOWER(employee_name)=%s", (name,))
        return self._select("LOWER(employee_name)=%s AND work_date>=%s", (name, since))

    def find_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        return self._select("work_date BETWEEN %s AND %s", (start, end))

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return self._to_model(r) if r else None

    def upsert(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0

        rows = [
            (
                r.employee_id,
                r.employee_name,
                r.work_date,
                r.department.key,
                to_time(r.entry_minutes),
                to_time(r.exit_minutes),
                int(round(r.total_hours * 60)),
                r.status.value,
                r.exception_label,
                r.operation_code,
            )
            for r in records
        ]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records(
                    employee_id, employee_name, work_date, department,
                    entry_time, exit_time, total_minutes, status, exception_label, operation_code
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    department=VALUES(department),
                    entry_time=VALUES(entry_time),
                    exit_time=VALUES(exit_time),
                    total_minutes=VALUES(total_minutes),
                    status=VALUES(status),
                    exception_label=VALUES(exception_label),
                    operation_code=VALUES(operation_code)
                """,
                rows,
            )
        return len(rows)

    def delete_by_date(self, work_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE work_date=%s", (work_date,))
            return int(cur.rowcount or 0)
