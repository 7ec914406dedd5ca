from datetime import date

from punch_ledger.attendance.model import AttendanceRecord
from punch_ledger.core.enums import AttendanceStatus
from punch_ledger.departments.model import OTHERS
from punch_ledger.stats.calculator.standard_calculator import StandardHoursCalculator


def _record(hours, status):
    return AttendanceRecord("1", "A", date(2025, 1, 1), OTHERS, 480, 480 + int(hours * 60), hours, status)


def test_standard_calculator_uses_recorded_hours():
    assert StandardHoursCalculator().worked_hours(_record(11.5, AttendanceStatus.EARLY_EXIT)) == 11.5


def test_standard_calculator_ignores_missing_checkout_hours():
    assert StandardHoursCalculator().worked_hours(_record(3.0, AttendanceStatus.MISSING_CHECKOUT)) == 0.0
