"""Read time-clock exports (``.xlsx`` / ``.csv``) into raw punches."""

from __future__ import annotations

import logging
import os
import zipfile
from typing import IO, List, Optional, Union

import pandas as pd

from ..core.exceptions import ValidationError
from .model import RawPunch

logger = logging.getLogger(__name__)

COLUMN_ALIASES = {
    "employee_id": ("AC.No.", "AC No", "AC.No", "AC-No.", "Employee ID"),
    "employee_name": ("Name", "Employee Name"),
    "timestamp": ("Time", "Date/Time", "Timestamp"),
    "exception_label": ("Exception",),
    "operation_code": ("Operation",),
}

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")


def _load_frame(source: Union[str, IO], extension: str) -> pd.DataFrame:
    if extension == ".csv":
        return pd.read_csv(source, dtype=str, keep_default_na=False)
    return pd.read_excel(source, dtype=str, keep_default_na=False)


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = df.rename(columns=lambda c: str(c).strip())
    renames = {}
    for standard, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in df.columns:
                renames[alias] = standard
                break
    return df.rename(columns=renames)


def read_punch_sheet(source: Union[str, IO], *, filename: Optional[str] = None) -> List[RawPunch]:
    """Parse an exported punch sheet.

    Rows without a time value are skipped. The file name decides the format,
    so pass ``filename`` when ``source`` is a stream.
    """

    name = filename or getattr(source, "name", None) or str(source)
    extension = os.path.splitext(name)[1].lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise ValidationError(f"Unsupported punch file type: {extension or name!r}")

    try:
        df = _normalize_columns(_load_frame(source, extension))
    except (ValueError, OSError, zipfile.BadZipFile) as e:
        raise ValidationError(f"Could not read punch file {name!r}: {e}") from e

    if "timestamp" not in df.columns or "employee_name" not in df.columns:
        raise ValidationError(f"Punch file {name!r} needs 'Name' and 'Time' columns")

    punches: List[RawPunch] = []
    skipped = 0
    for row in df.to_dict(orient="records"):
        timestamp = str(row.get("timestamp") or "").strip()
        if not timestamp:
            skipped += 1
            continue
        punches.append(
            RawPunch(
                employee_id=str(row.get("employee_id") or "").strip(),
                employee_name=str(row.get("employee_name") or "").strip(),
                timestamp=timestamp,
                exception_label=str(row.get("exception_label") or "").strip() or None,
                operation_code=str(row.get("operation_code") or "").strip() or None,
            )
        )

    if skipped:
        logger.info("Skipped %d rows without a time in %s", skipped, name)
    return punches
