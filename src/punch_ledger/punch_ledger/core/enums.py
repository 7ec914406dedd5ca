from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Derived attendance status of one employee-day."""

    ON_TIME = "onTime"
    LATE_ENTRY = "lateEntry"
    EARLY_EXIT = "earlyExit"
    MISSING_CHECKOUT = "missingCheckout"
    LESS_HOURS = "lessHours"
    OVERTIME = "overtime"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    AttendanceStatus.ON_TIME: "On Time",
    AttendanceStatus.LATE_ENTRY: "Late Entry",
    AttendanceStatus.EARLY_EXIT: "Early Exit",
    AttendanceStatus.MISSING_CHECKOUT: "Missing Checkout",
    AttendanceStatus.LESS_HOURS: "Less Hours",
    AttendanceStatus.OVERTIME: "Overtime",
}


class DepartmentName(str, Enum):
    """Closed set of departments."""

    ADMINISTRATION = "administration"
    SUPERVISOR = "supervisor"
    PACKING = "packing"
    PRODUCTION = "production"
    OTHERS = "others"


class ProductionCategory(str, Enum):
    MASTER = "master"
    OPERATOR = "operator"
