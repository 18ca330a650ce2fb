"""File writer"""

import threading
from pathlib import Path
from typing import Optional, Union

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import JSONFormatter


class FileWriter:
    """
    Append newline-delimited JSON documents to a file.

    The file is opened in append mode, so re-creating a writer against an
    existing path never truncates it. Each entry is written with a single
    ``write`` call and flushed; entries from several processes appending to
    the same file are only ordered as far as OS append atomicity allows.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file (created with its parents if missing)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: JSONFormatter)
        """
        self.filepath = Path(filepath)
        self.encoding = encoding
        self.formatter = formatter or JSONFormatter()
        self._lock = threading.Lock()
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(
            self.filepath, "a", encoding=self.encoding, errors="backslashreplace"
        )

    def write(self, entry: LogEntry):
        """Append log entry to file."""
        line = self.formatter.format(entry) + "\n"
        with self._lock:
            if self._file is None:
                self._open()
            self._file.write(line)
            self._file.flush()

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    def __repr__(self) -> str:
        return f"FileWriter('{self.filepath}')"
