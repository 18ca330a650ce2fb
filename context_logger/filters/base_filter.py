"""
Base filter interface
"""

from abc import ABC, abstractmethod

from context_logger.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Extra gate between the level check and the writers.

    A filter sees the fully built entry, context snapshot included, so it
    can decide on message, payload or context.
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """Return False to drop the entry before any writer sees it."""

    def __call__(self, entry: LogEntry) -> bool:
        return self.should_log(entry)
