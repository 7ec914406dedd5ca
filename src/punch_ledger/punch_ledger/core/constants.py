"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

DEFAULT_GRACE_MINUTES = 15
# lessHours is flagged when a day falls short by more than this many grace periods.
LESS_HOURS_GRACE_FACTOR = 2

# Fixed policy schedules (entry, exit as "HH:MM", expected hours).
ADMINISTRATION_SCHEDULE = ("09:00", "18:00", 9.0)
ALTERNATE_SCHEDULE = ("08:00", "18:00", 10.0)
STANDARD_SCHEDULE = ("08:00", "20:00", 12.0)

PERIOD_WINDOWS = {
    "7days": 7,
    "30days": 30,
    "allTime": None,
}
