"""
Level-based filter

Filters log entries based on a log level range
"""

from typing import Optional

from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel, should_emit
from context_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log entries based on log level.

    Complements the logger's minimum level with an optional maximum, e.g.
    to route only DEBUG and INFO entries to a particular logger.
    """

    def __init__(
        self,
        min_level: Optional[LogLevel] = None,
        max_level: Optional[LogLevel] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Example:
            # Only log DEBUG to INFO
            filter = LevelFilter(min_level=LogLevel.DEBUG, max_level=LogLevel.INFO)
        """
        self.min_level = LogLevel.coerce(min_level) if min_level is not None else None
        self.max_level = LogLevel.coerce(max_level) if max_level is not None else None

    def should_log(self, entry: LogEntry) -> bool:
        if self.min_level is not None and not should_emit(entry.level, self.min_level):
            return False
        if self.max_level is not None and entry.level > self.max_level:
            return False
        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
