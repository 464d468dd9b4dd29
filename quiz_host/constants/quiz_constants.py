"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_LIMIT_SECONDS: int = 15
DEFAULT_QUESTION_COUNT: int = 3
DEFAULT_ROOM_CAPACITY: int = 10
OPTION_COUNT: int = 4
COUNTDOWN_TICK_INTERVAL_MS: int = 1000
HOST_DISPLAY_NAME: str = "Host"
BULK_PASTE_MIN_LINES: int = 6
MAX_QUESTION_COUNT: int = 100
