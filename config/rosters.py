"""Employee rosters used to resolve departments and schedules.

Entries are lower-case name fragments; an employee matches when the fragment
occurs anywhere in their name.
"""

DEPARTMENT_ROSTERS = {
    "administration": [
        "asim ali sabri",
        "mian abdullah",
        "abdul wahab",
        "javed shakoor",
        "faisal aslam",
        "muhammad zaryab",
        "rizwan cheema",
    ],
    "supervisor": [
        "shafqat",
        "master mohsin",
    ],
    "packing": [
        "iqra bibi",
        "nadia bibi",
        "rukhsana kusar",
        "maryam bibi",
        "bilal ali",
        "mujahid ali",
        "asif ali",
        "muhammad usman",
        "sufyan ali",
        "mureed abbas",
    ],
    "production": [
        "noor ali",
    ],
}

# Production staff with a known sub-department / category.
PRODUCTION_ROSTER = {
    "irfanneedle": {"sub_department": "needle", "category": "operator"},
}

# Shorter-shift cohort (08:00-18:00, 10 hours).
ALTERNATE_SCHEDULE_ROSTER = [
    "iqra bibi",
    "nadia bibi",
    "rukhsana kusar",
    "maryam bibi",
]
