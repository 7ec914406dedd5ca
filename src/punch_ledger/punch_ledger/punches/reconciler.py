"""Reduce a day's unordered punches to one entry/exit pair per employee."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Optional, Tuple

from ..attendance.classifier import StatusClassifier
from ..attendance.model import AttendanceRecord
from ..clock.time_model import parse_clock_time
from .model import ParsedPunch, PunchTimestamp, RawPunch, ReconciliationResult

logger = logging.getLogger(__name__)

_DATETIME_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
)


def parse_punch_timestamp(value: PunchTimestamp) -> Tuple[Optional[datetime], int]:
    """Return (full timestamp or None, minutes since midnight).

    Raises ``ValueError`` when the value is empty or not a recognisable time.
    """

    if isinstance(value, datetime):
        return value, value.hour * 60 + value.minute
    if isinstance(value, time):
        return None, value.hour * 60 + value.minute

    text = str(value or "").strip()
    if not text:
        raise ValueError("empty timestamp")

    for fmt in _DATETIME_FORMATS:
        try:
            moment = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return moment, moment.hour * 60 + moment.minute

    # Unrecognised date part: fall back to the time of day after it.
    tokens = text.split()
    if len(tokens) > 1:
        tail = " ".join(tokens[-2:]) if tokens[-1].upper() in ("AM", "PM") else tokens[-1]
        return None, parse_clock_time(tail)
    return None, parse_clock_time(text)


def _group_key(punch: RawPunch) -> Tuple[str, str]:
    return (str(punch.employee_id or "").strip(), " ".join(punch.employee_name.split()).casefold())


class PunchReconciler:
    def __init__(self, classifier: StatusClassifier):
        self._classifier = classifier

    def _parse(self, punches: Iterable[RawPunch]) -> Tuple[Dict[Tuple[str, str], List[ParsedPunch]], List[RawPunch]]:
        groups: Dict[Tuple[str, str], List[ParsedPunch]] = {}
        dropped: List[RawPunch] = []

        for punch in punches:
            if not (punch.employee_name or "").strip():
                logger.warning("Dropping punch without employee name (id=%r)", punch.employee_id)
                dropped.append(punch)
                continue
            try:
                moment, minutes = parse_punch_timestamp(punch.timestamp)
            except ValueError as e:
                logger.warning("Dropping punch for %s: unparsable timestamp %r (%s)", punch.employee_name, punch.timestamp, e)
                dropped.append(punch)
                continue
            groups.setdefault(_group_key(punch), []).append(ParsedPunch(punch, moment, minutes))

        return groups, dropped

    @staticmethod
    def _chronological(parsed: List[ParsedPunch]) -> List[ParsedPunch]:
        if all(p.moment is not None for p in parsed):
            return sorted(parsed, key=lambda p: p.moment)
        return sorted(parsed, key=lambda p: p.minutes)

    def reconcile(self, punches: Iterable[RawPunch], work_date: date) -> ReconciliationResult:
        groups, dropped = self._parse(punches)
        records: List[AttendanceRecord] = []

        for parsed in groups.values():
            ordered = self._chronological(parsed)
            first, last = ordered[0], ordered[-1]
            name = " ".join(first.punch.employee_name.split())

            single = len(ordered) == 1 or first.minutes == last.minutes
            if single:
                exit_minutes = None
                exception_label = first.punch.exception_label
                operation_code = first.punch.operation_code
            else:
                exit_minutes = last.minutes
                exception_label = first.punch.exception_label or last.punch.exception_label
                operation_code = first.punch.operation_code or last.punch.operation_code

            record = AttendanceRecord(
                employee_id=str(first.punch.employee_id or "").strip(),
                employee_name=name,
                work_date=work_date,
                department=self._classifier.resolver.department_for_employee(name),
                entry_minutes=first.minutes,
                exit_minutes=exit_minutes,
                exception_label=exception_label or None,
                operation_code=operation_code or None,
            )
            records.append(self._classifier.recompute(record))

        if dropped:
            logger.info("Reconciled %d records for %s, dropped %d punches", len(records), work_date, len(dropped))
        return ReconciliationResult(records=records, dropped=dropped)
