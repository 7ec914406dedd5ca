from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import List, Optional, Union

from ..attendance.model import AttendanceRecord

PunchTimestamp = Union[str, datetime, time, None]


@dataclass(frozen=True)
class RawPunch:
    """One clock event as exported by the time clock."""

    employee_id: str
    employee_name: str
    timestamp: PunchTimestamp
    exception_label: Optional[str] = None
    operation_code: Optional[str] = None


@dataclass(frozen=True)
class ParsedPunch:
    punch: RawPunch
    moment: Optional[datetime]
    minutes: int


@dataclass(frozen=True)
class ReconciliationResult:
    records: List[AttendanceRecord] = field(default_factory=list)
    dropped: List[RawPunch] = field(default_factory=list)
