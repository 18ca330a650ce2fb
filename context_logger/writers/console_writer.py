"""Console writer with ANSI colors"""

from typing import Any, Callable, Optional, TextIO

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.text_formatter import TextFormatter
from context_logger.relay import relay_message


class ConsoleWriter:
    """Write logs to console with optional colors."""

    def __init__(
        self,
        print_fn: Optional[Callable[[str], Any]] = None,
        colored: bool = True,
        formatter: Optional[BaseFormatter] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console writer.

        Args:
            print_fn: Custom output function receiving the formatted line.
                      When set, no colors are added.
            colored: Use ANSI color codes (default output only)
            stream: Output stream for the default output (default: sys.stderr)
            formatter: Log formatter (default: TextFormatter)
        """
        self.print_fn = print_fn
        self.colored = colored
        self.stream = stream
        self.formatter = formatter or TextFormatter()

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        msg = self.formatter.format(entry)

        if self.print_fn is not None:
            self.print_fn(msg)
            return

        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"
        relay_message(msg, self.stream)

    def flush(self):
        """Flush stream."""
        if self.stream is not None:
            self.stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleWriter(colored={self.colored})"
