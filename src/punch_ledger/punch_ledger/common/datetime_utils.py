from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

_FILENAME_DATE = re.compile(r"(\d{2})(\d{2})(\d{4})")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def is_sunday(value: date) -> bool:
    return value.weekday() == 6


def work_date_from_filename(filename: str, *, default: Optional[date] = None) -> date:
    """Extract the punch-export date from a ``DDMMYYYY`` file name.

    Falls back to ``default`` (today when omitted) if the name has no valid date.
    """

    match = _FILENAME_DATE.search(filename or "")
    if match:
        day, month, year = (int(g) for g in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            pass
    return default or today_local()
