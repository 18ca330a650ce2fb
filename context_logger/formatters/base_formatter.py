"""
Base formatter interface

Every sink renders entries through a formatter: lines for the console,
JSON documents for files and column values for the database.
"""

from abc import ABC, abstractmethod

from context_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """Turns a LogEntry into the text a writer emits."""

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Render an entry.

        Implementations must not raise for unusual payloads; values that
        cannot be serialised are rendered with a string fallback.

        Args:
            entry: The log entry to render

        Returns:
            Rendered text without a trailing newline
        """

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)
