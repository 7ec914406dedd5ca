"""Clock-time conversions.

A clock time is stored as integer minutes since midnight in ``[0, 1440)``.
Shifts that end on the next calendar day are recognised purely by
``exit < entry``; no separate night-shift flag exists on a record.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import Optional, Union

from ..core.constants import MINUTES_PER_DAY

ClockInput = Union[str, time, datetime, None]


def parse_clock_time(raw: ClockInput) -> int:
    """Convert ``hh:mm AM/PM``, ``hh:mm[:ss]`` or a time object to minutes.

    Empty input returns 0 ("no time"); callers that must tell absence apart
    from midnight check for emptiness first. Non-empty text that is not a
    clock time raises ``ValueError``.
    """

    if raw is None:
        return 0
    if isinstance(raw, datetime):
        return raw.hour * 60 + raw.minute
    if isinstance(raw, time):
        return raw.hour * 60 + raw.minute

    text = str(raw).strip().upper()
    if not text:
        return 0

    period = None
    if text.endswith("AM") or text.endswith("PM"):
        period = text[-2:]
        text = text[:-2].strip()

    parts = text.split(":")
    if len(parts) < 2 or len(parts) > 3:
        raise ValueError(f"Invalid clock time: {raw!r}")
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid clock time: {raw!r}") from None

    if period:
        if not 1 <= hours <= 12:
            raise ValueError(f"Invalid 12-hour clock time: {raw!r}")
        if period == "PM" and hours < 12:
            hours += 12
        if period == "AM" and hours == 12:
            hours = 0

    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Clock time out of range: {raw!r}")
    return hours * 60 + minutes


def format_clock_time_12h(minutes: int) -> str:
    """Render minutes as ``hh:mm AM``/``hh:mm PM`` (12:00 AM is midnight)."""
    minutes = int(minutes) % MINUTES_PER_DAY
    hours24, mins = divmod(minutes, 60)
    period = "PM" if hours24 >= 12 else "AM"
    hours12 = hours24 % 12 or 12
    return f"{hours12:02d}:{mins:02d} {period}"


def format_clock_time_24h(minutes: int) -> str:
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def crosses_midnight(entry_minutes: int, exit_minutes: int) -> bool:
    return exit_minutes < entry_minutes


def span_minutes(entry_minutes: int, exit_minutes: int) -> int:
    if crosses_midnight(entry_minutes, exit_minutes):
        return (MINUTES_PER_DAY - entry_minutes) + exit_minutes
    return exit_minutes - entry_minutes


def elapsed_hours(entry_minutes: int, exit_minutes: int) -> float:
    """Hours between entry and exit, wrapping past midnight, rounded to 2 decimals."""
    return round(span_minutes(entry_minutes, exit_minutes) / 60, 2)


def to_time(minutes: Optional[int]) -> Optional[time]:
    if minutes is None:
        return None
    minutes = int(minutes) % MINUTES_PER_DAY
    return time(hour=minutes // 60, minute=minutes % 60)
