"""Punch Ledger package.

Turns raw time-clock punches into daily attendance records and per-employee
statistics. The package is organized by feature modules (clock, schedules,
punches, attendance, stats, ...) with thin Flask controllers on top of
service/repository layers.
"""
