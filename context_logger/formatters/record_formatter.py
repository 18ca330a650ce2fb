"""
Record formatter for the database writer

Maps an entry onto the column values of the log table.
"""

from typing import Any, Dict, Optional

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import encodable_text, safe_dumps


COLUMNS = ("timestamp", "level", "message", "context", "data", "error")


class RecordFormatter(BaseFormatter):
    """
    Format log entries as table rows.

    ``context`` is stored as JSON text; ``data`` and ``error`` as JSON text
    or NULL when absent. JSON columns are ASCII-escaped and the message has
    unencodable characters backslash-escaped, so every row can be bound.
    """

    def to_record(self, entry: LogEntry) -> Dict[str, Optional[str]]:
        """
        Build the column values for an entry.

        Args:
            entry: Log entry to convert

        Returns:
            Mapping of column name to text value
        """
        return {
            "timestamp": entry.timestamp_text,
            "level": entry.level.name,
            "message": encodable_text(entry.message),
            "context": safe_dumps(entry.context, ensure_ascii=True),
            "data": self._nullable(entry.data),
            "error": self._nullable(entry.error.to_dict() if entry.error else None),
        }

    def format(self, entry: LogEntry) -> str:
        """Render the record as a JSON object string."""
        return safe_dumps(self.to_record(entry))

    @staticmethod
    def _nullable(value: Any) -> Optional[str]:
        return None if value is None else safe_dumps(value, ensure_ascii=True)

    def __repr__(self) -> str:
        return "RecordFormatter()"
