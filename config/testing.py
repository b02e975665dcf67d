SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

DEFAULT_WINDOW = "week"
ABSENCE_RANK_LIMIT = 5

SEED_DEMO_DATA = False
