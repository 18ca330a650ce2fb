"""
JSON formatter for structured logging

Formats log entries as JSON documents, one object per line.
"""

import json
from typing import Any, Dict, Optional

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter


def safe_dumps(
    value: Any,
    indent: Optional[int] = None,
    ensure_ascii: bool = False,
) -> str:
    """
    Serialise ``value`` to JSON text without ever raising.

    Unsupported objects nested in a structure are encoded with ``str()``.
    If the value still cannot be encoded (e.g. a cyclic structure), its
    ``repr()`` is encoded as a JSON string instead.

    Args:
        value: Any Python value
        indent: JSON indentation (None for compact)
        ensure_ascii: Escape non-ASCII characters, lone surrogates included,
                      so the text is encodable in any codec

    Returns:
        JSON text
    """
    try:
        return json.dumps(value, indent=indent, ensure_ascii=ensure_ascii, default=str)
    except Exception:
        pass
    try:
        return json.dumps(repr(value), ensure_ascii=ensure_ascii)
    except Exception:
        return json.dumps(f"<unserializable {type(value).__name__}>")


def encodable_text(text: str, encoding: str = "utf-8") -> str:
    """Replace characters ``encoding`` cannot represent with backslash escapes."""
    return text.encode(encoding, "backslashreplace").decode(encoding)


def json_safe(value: Any) -> Any:
    """Return a structure equivalent to ``value`` that json can encode."""
    return json.loads(safe_dumps(value))


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces the newline-delimited document used by the file writer, with
    keys timestamp, level, message, context, data and error.
    """

    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = True):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters (default), which keeps
                          every line writable even for lone surrogates

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def to_document(self, entry: LogEntry) -> Dict[str, Any]:
        """
        Build the JSON-safe document for an entry.

        Args:
            entry: Log entry to convert

        Returns:
            Dictionary that json.dumps accepts
        """
        document = entry.to_dict()
        for key in ("context", "data", "error"):
            if document[key] is not None:
                document[key] = json_safe(document[key])
        return document

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string
        """
        return json.dumps(
            self.to_document(entry),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
