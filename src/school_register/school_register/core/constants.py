"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

DEFAULT_WINDOW = "week"
DEFAULT_ABSENCE_RANK_LIMIT = 5
WEEK_DAYS = 7

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
SCHOOL_DAYS = 5

STATUS_LABELS = {
    "present": "Present",
    "absent": "Absent",
}
