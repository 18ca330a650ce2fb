"""
Log level enumeration and ordering
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module, so the total order
    of severities is the integer order of the members.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARNING = 30    # Warning messages
    WARN = 30       # Alias of WARNING
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = str(level_str).strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, level: Union["LogLevel", str, int]) -> "LogLevel":
        """Accept a LogLevel, a level name or a numeric level."""
        if isinstance(level, cls):
            return level
        if isinstance(level, str):
            return cls.from_string(level)
        return cls(level)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return LEVEL_COLORS.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[36m",     # Cyan
    LogLevel.INFO: "\033[32m",      # Green
    LogLevel.WARNING: "\033[33m",   # Yellow
    LogLevel.ERROR: "\033[31m",     # Red
}


def should_emit(event_level: LogLevel, min_level: LogLevel) -> bool:
    """Return True if an event at ``event_level`` passes ``min_level``."""
    return event_level >= min_level
