import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punch_ledger_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

GRACE_MINUTES = 15

# Synthetic rosters so tests never depend on real staff names.
DEPARTMENT_ROSTERS = {
    "administration": ["ada admin"],
    "supervisor": ["sam super"],
    "packing": ["pat packer", "alice alt"],
    "production": ["pete prod"],
}
PRODUCTION_ROSTER = {
    "mia master": {"sub_department": "cutting", "category": "master"},
}
ALTERNATE_SCHEDULE_ROSTER = ["alice alt"]
