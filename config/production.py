import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_WINDOW = os.getenv("DEFAULT_WINDOW", "week")
ABSENCE_RANK_LIMIT = int(os.getenv("ABSENCE_RANK_LIMIT", "5"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
