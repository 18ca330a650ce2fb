"""
Log entry data structure

A LogEntry is built once per log call, handed to the writers and then
discarded.
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from context_logger.core.log_level import LogLevel


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_timestamp(timestamp: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    timestamp = timestamp.astimezone(timezone.utc)
    millis = timestamp.microsecond // 1000
    return f"{timestamp.strftime(TIMESTAMP_FORMAT)}.{millis:03d}Z"


def safe_str(value: Any) -> str:
    """str(value), or a type-name placeholder when __str__ raises."""
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def parse_timestamp(text: str) -> datetime:
    """Inverse of format_timestamp."""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass
class ErrorInfo:
    """Normalised description of an error attached to a log entry."""

    message: str
    type: Optional[str] = None
    trace: Optional[str] = None

    @classmethod
    def from_error(cls, error: Any) -> Optional["ErrorInfo"]:
        """
        Normalise an error-like value.

        Args:
            error: None, a string, an exception, a mapping with a
                   ``message`` key or any object

        Returns:
            ErrorInfo, or None when no error was given
        """
        if error is None:
            return None
        if isinstance(error, ErrorInfo):
            return error
        if isinstance(error, str):
            return cls(message=error)
        if isinstance(error, BaseException):
            trace = None
            if error.__traceback__ is not None:
                trace = "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                )
            return cls(message=safe_str(error), type=type(error).__name__, trace=trace)
        if isinstance(error, Mapping) and "message" in error:
            return cls(
                message=safe_str(error["message"]),
                type=error.get("type"),
                trace=error.get("trace"),
            )
        message = getattr(error, "message", None)
        return cls(message=safe_str(message if message is not None else error))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message}
        if self.type:
            data["type"] = self.type
        if self.trace:
            data["trace"] = self.trace
        return data


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything about a single log call: when it happened, how
    severe it is, what was said, the optional payloads and the logger
    context as it was at call time.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    data: Any = None
    error: Optional[ErrorInfo] = None
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = safe_str(self.message)

    @classmethod
    def build(
        cls,
        level: LogLevel,
        message: Any,
        data: Any = None,
        error: Any = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> "LogEntry":
        """
        Assemble an entry for a log call.

        Args:
            level: Severity of the call
            message: Message text (coerced to str)
            data: Optional payload, kept as given
            error: Optional error (see ErrorInfo.from_error)
            context: Context snapshot to attach

        Returns:
            New LogEntry stamped with the current UTC time
        """
        return cls(
            level=level,
            message=message,
            data=data,
            error=ErrorInfo.from_error(error),
            context=dict(context) if context else {},
        )

    @property
    def timestamp_text(self) -> str:
        """Timestamp in the fixed ``YYYY-MM-DDTHH:MM:SS.sssZ`` format."""
        return format_timestamp(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary with keys timestamp, level, message, context, data
            and error (None when absent)
        """
        return {
            "timestamp": self.timestamp_text,
            "level": self.level.name,
            "message": self.message,
            "context": self.context,
            "data": self.data,
            "error": self.error.to_dict() if self.error else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary produced by to_dict (or read back from a sink)

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel.from_string(data["level"]),
            message=data["message"],
            timestamp=parse_timestamp(data["timestamp"]),
            data=data.get("data"),
            error=ErrorInfo.from_error(data.get("error")),
            context=dict(data.get("context") or {}),
        )

    def __str__(self) -> str:
        """String representation."""
        return f"{self.timestamp_text} {self.level.name} {self.message}"
