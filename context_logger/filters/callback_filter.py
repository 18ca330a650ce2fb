"""
Callback-based filter

Filters log entries using custom callback functions
"""

from typing import Callable

from context_logger.core.log_entry import LogEntry
from context_logger.filters.base_filter import BaseFilter
from context_logger.relay import report_error


class CallbackFilter(BaseFilter):
    """
    Filter log entries using a custom callback function.
    """

    def __init__(self, callback: Callable[[LogEntry], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEntry and returns bool.
                     Should return True to log the entry, False to discard it.

        Example:
            # Only entries tagged with a request id
            def has_request_id(entry):
                return "request_id" in entry.context

            filter = CallbackFilter(has_request_id)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, entry: LogEntry) -> bool:
        """
        Use callback to determine if entry should be logged.

        A callback that raises lets the entry through.
        """
        try:
            return bool(self.callback(entry))
        except Exception as e:
            report_error(f"Filter callback error: {e}")
            return True

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
