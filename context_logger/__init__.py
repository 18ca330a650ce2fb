"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Context Logger - A structured logger with persistent context and
console, JSON-lines file and database sinks
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from context_logger.core.logger import Logger, create_logger
from context_logger.core.logger_builder import LoggerBuilder
from context_logger.core.log_context import LogContext
from context_logger.core.log_entry import ErrorInfo, LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.relay import relay_message

# Import submodules (not all classes by default)
from context_logger import filters
from context_logger import formatters
from context_logger import writers

__all__ = [
    "Logger",
    "create_logger",
    "LoggerBuilder",
    "LogContext",
    "ErrorInfo",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "relay_message",
    "filters",
    "formatters",
    "writers",
]
