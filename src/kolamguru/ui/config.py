"""UI configuration constants.

Labels, limits and log styling shared by the Textual app and the console CLI.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Session log levels; a panel shows entries at or above its threshold."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Parse "debug"/"info"/"warning"/"error". Unknown names mean DEBUG."""
        return cls.__members__.get(level_str.upper(), cls.DEBUG)


LEVEL_STYLES = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}

# Components that report through the session debug callback
COMPONENT_STYLES = {
    "TUI": "cyan",
    "Session": "green",
    "Intent": "magenta",
    "Scroll": "bright_blue",
}

# Scroll configuration
ROW_SCROLL_THRESHOLD = 3  # Terminal rows from bottom still treated as following

INPUT_HISTORY_MAX_SIZE = 100

# Log entries echo user text, so they are cut to one line's worth
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 200

# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"
ASSISTANT_NAME = "Kolam Guru"
USER_NAME = "You"
JUMP_TO_LATEST_LABEL = "↓ New messages below"
