"""Import one day of time-clock punches from the command line.

    python scripts/import_punches.py exports/attendance_12052025.xlsx
    python scripts/import_punches.py punches.csv --date 2025-05-12 --dry-run
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "punch_ledger"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from punch_ledger.attendance.service import status_counts
from punch_ledger.clock.time_model import format_clock_time_12h
from punch_ledger.common.datetime_utils import parse_iso_date
from punch_ledger.container import build_container
from punch_ledger.core.exceptions import DomainError

logger = logging.getLogger("import_punches")


def _clock(minutes):
    return format_clock_time_12h(minutes) if minutes is not None else "-"


def main() -> int:
    parser = argparse.ArgumentParser(description="Reconcile a punch export and store the day's attendance.")
    parser.add_argument("path", type=Path, help=".xlsx or .csv export from the time clock")
    parser.add_argument("--date", type=parse_iso_date, default=None, help="work date (YYYY-MM-DD); default from file name")
    parser.add_argument("--dry-run", action="store_true", help="reconcile and print, do not write to the database")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    try:
        summary = container.attendance_service.import_file(
            str(args.path), args.path.name, work_date=args.date, save=not args.dry_run
        )
    except DomainError as e:
        logger.error("%s", e)
        return 1

    for r in summary.records:
        print(f"{r.employee_name:<28} {_clock(r.entry_minutes):>9} {_clock(r.exit_minutes):>9} {r.total_hours:>6.2f}  {r.status.label}")
    counts = ", ".join(f"{s.label}: {n}" for s, n in status_counts(summary.records).items())
    logger.info("%s: %d records (%s), %d punches dropped, %d saved", summary.work_date, len(summary.records), counts, summary.dropped, summary.saved)
    return 0


if __name__ == "__main__":
    sys.exit(main())
