from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import IO, Dict, Iterable, List, Optional, Sequence, Union

from ..clock.time_model import format_clock_time_12h, parse_clock_time
from ..common.datetime_utils import work_date_from_filename
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.repository import DepartmentSettingsRepository
from ..punches.importer import read_punch_sheet
from ..punches.model import RawPunch
from ..punches.reconciler import PunchReconciler
from .classifier import StatusClassifier
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    work_date: date
    records: List[AttendanceRecord]
    dropped: int
    saved: int


def status_counts(records: Iterable[AttendanceRecord]) -> Dict[AttendanceStatus, int]:
    """Count records per status; every status is present, in declaration order."""

    counts = {status: 0 for status in AttendanceStatus}
    for r in records:
        counts[r.status] += 1
    return counts


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "date": r.work_date.strftime("%Y-%m-%d"),
        "department": r.department.key,
        "entry": format_clock_time_12h(r.entry_minutes) if r.entry_minutes is not None else None,
        "exit": format_clock_time_12h(r.exit_minutes) if r.exit_minutes is not None else None,
        "total_hours": r.total_hours,
        "status": r.status.value,
        "status_label": r.status.label,
        "exception": r.exception_label,
        "operation": r.operation_code,
    }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        settings: DepartmentSettingsRepository,
        classifier: StatusClassifier,
    ):
        self._attendance = attendance
        self._settings = settings
        self._classifier = classifier

    def _current_classifier(self) -> StatusClassifier:
        # Department overrides are read once per operation and frozen into the resolver.
        resolver = self._classifier.resolver.with_overrides(self._settings.list_all())
        return self._classifier.with_resolver(resolver)

    def import_punches(self, punches: Sequence[RawPunch], work_date: date, *, save: bool = True) -> ImportSummary:
        result = PunchReconciler(self._current_classifier()).reconcile(punches, work_date)
        saved = self.save_day(work_date, result.records) if save else 0
        logger.info(
            "Imported %d punches for %s: %d records, %d dropped",
            len(punches), work_date, len(result.records), len(result.dropped),
        )
        return ImportSummary(work_date=work_date, records=result.records, dropped=len(result.dropped), saved=saved)

    def import_file(
        self,
        source: Union[str, IO],
        filename: str,
        *,
        work_date: Optional[date] = None,
        save: bool = True,
    ) -> ImportSummary:
        punches = read_punch_sheet(source, filename=filename)
        day = work_date or work_date_from_filename(filename)
        return self.import_punches(punches, day, save=save)

    def save_day(self, work_date: date, records: Sequence[AttendanceRecord]) -> int:
        """Replace every stored record of ``work_date`` with ``records``."""

        for r in records:
            if r.work_date != work_date:
                raise ValidationError(f"Record for {r.employee_name} is dated {r.work_date}, expected {work_date}")
        removed = self._attendance.delete_by_date(work_date)
        if removed:
            logger.info("Replacing %d stored records for %s", removed, work_date)
        return self._attendance.upsert(records)

    def list_for_date(self, work_date: date) -> List[AttendanceRecord]:
        return list(self._attendance.find_by_date(work_date))

    def delete_day(self, work_date: date) -> int:
        return self._attendance.delete_by_date(work_date)

    @staticmethod
    def _parse_correction(value: Optional[str], current: Optional[int], field_name: str) -> Optional[int]:
        if value is None:
            return current
        if not str(value).strip():
            return None
        try:
            return parse_clock_time(value)
        except ValueError as e:
            raise ValidationError(f"{field_name}: {e}") from e

    def correct_record(
        self,
        record_id: int,
        *,
        entry: Optional[str] = None,
        exit: Optional[str] = None,
    ) -> AttendanceRecord:
        """Edit entry/exit of a stored record. ``None`` keeps a value, ``""`` clears it."""

        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError(f"Attendance record {record_id} not found")

        edited = AttendanceRecord(
            employee_id=record.employee_id,
            employee_name=record.employee_name,
            work_date=record.work_date,
            department=record.department,
            entry_minutes=self._parse_correction(entry, record.entry_minutes, "entry"),
            exit_minutes=self._parse_correction(exit, record.exit_minutes, "exit"),
            exception_label=record.exception_label,
            operation_code=record.operation_code,
            record_id=record.record_id,
        )
        if edited.entry_minutes is None and edited.exit_minutes is not None:
            raise ValidationError("exit requires an entry time")

        updated = self._current_classifier().recompute(edited)
        self._attendance.upsert([updated])
        return updated
