from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from ..core.constants import MINUTES_PER_DAY
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on any error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def mysql_time_to_minutes(value: Any) -> Optional[int]:
    """Minutes since midnight from a MySQL TIME column.

    mysql-connector hands TIME back as ``timedelta`` (pure and C extension),
    occasionally as ``datetime.time`` or ``'HH:MM:SS'`` text. Seconds are dropped.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value.hour * 60 + value.minute

    if isinstance(value, timedelta):
        return (int(value.total_seconds()) // 60) % MINUTES_PER_DAY

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return (int(parts[0]) * 60 + int(parts[1])) % MINUTES_PER_DAY

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
