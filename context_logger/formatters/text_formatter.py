"""
Text formatter for human-readable output

Renders ``{timestamp} {LEVEL} {message}`` followed by an indented JSON
block when the entry carries data or an error.
"""

from typing import Any, Callable, Dict, Optional

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import safe_dumps
from context_logger.relay import report_error


class TextFormatter(BaseFormatter):
    """
    Format log entries as readable lines.

    A custom ``format_fn`` takes over the whole rendering: it receives the
    LogEntry and its return value is used as the line.
    """

    DEFAULT_TEMPLATE = "{timestamp} {level} {message}"

    def __init__(
        self,
        template: Optional[str] = None,
        format_fn: Optional[Callable[[LogEntry], str]] = None,
        include_payload: bool = True,
        indent: int = 2,
    ):
        """
        Initialize text formatter.

        Args:
            template: Line template. Available placeholders:
                     - {timestamp}: ISO-8601 UTC timestamp
                     - {level}: Log level name
                     - {message}: Log message
            format_fn: Custom callable replacing the default rendering
            include_payload: Append data/error block after the line
            indent: Indentation of the data/error block

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format function
            formatter = TextFormatter(
                format_fn=lambda entry: f"[{entry.level}] {entry.message}"
            )
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.format_fn = format_fn
        self.include_payload = include_payload
        self.indent = indent

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string, possibly spanning several lines
        """
        if self.format_fn is not None:
            try:
                return str(self.format_fn(entry))
            except Exception as e:
                report_error(f"Format function error: {e}")

        try:
            line = self.template.format(
                timestamp=entry.timestamp_text,
                level=entry.level.name,
                message=entry.message,
            )
        except (KeyError, IndexError) as e:
            # Fallback if template has unknown placeholder
            line = f"[FORMAT ERROR: {e}] {entry.message}"

        if self.include_payload:
            payload = self._payload(entry)
            if payload:
                line = f"{line}\n{safe_dumps(payload, indent=self.indent)}"
        return line

    @staticmethod
    def _payload(entry: LogEntry) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if entry.data is not None:
            payload["data"] = entry.data
        if entry.error is not None:
            payload["error"] = entry.error.to_dict()
        return payload

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
