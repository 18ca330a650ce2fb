"""
Log formatters module

Provides the line, JSON document and database record renderings.
"""

from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.text_formatter import TextFormatter
from context_logger.formatters.json_formatter import JSONFormatter, safe_dumps
from context_logger.formatters.record_formatter import RecordFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "RecordFormatter",
    "safe_dumps",
]
