"""
Log filters module

Optional filters applied after the logger's level check.
"""

from context_logger.filters.base_filter import BaseFilter
from context_logger.filters.level_filter import LevelFilter
from context_logger.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "CallbackFilter",
]
