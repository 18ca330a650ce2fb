"""
Parallel-safe message relay

Default output primitive for the console writer. Each message goes out as a
single ``write`` call followed by a flush, so lines coming from worker
processes sharing a terminal are not interleaved mid-line (up to the OS
pipe atomicity limit). Within one process a lock serialises writers.
"""

import sys
import threading
from typing import Optional, TextIO

_lock = threading.Lock()


def relay_message(text: str, stream: Optional[TextIO] = None) -> None:
    """
    Write a pre-formatted message to ``stream`` (default: sys.stderr).

    Args:
        text: Message without trailing newline
        stream: Target text stream
    """
    stream = stream or sys.stderr
    with _lock:
        stream.write(text + "\n")
        stream.flush()


def report_error(text: str) -> None:
    """Best-effort internal diagnostic on stderr; never raises."""
    try:
        relay_message(text, sys.stderr)
    except (OSError, ValueError, AttributeError):
        pass
