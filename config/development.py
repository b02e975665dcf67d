import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Window used when a request does not pass ?window=
DEFAULT_WINDOW = os.getenv("DEFAULT_WINDOW", "week")
ABSENCE_RANK_LIMIT = int(os.getenv("ABSENCE_RANK_LIMIT", "5"))

# Load the sample students/attendance/notes on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
