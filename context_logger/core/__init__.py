"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogContext: Persistent context store
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from context_logger.core.logger import Logger, create_logger
from context_logger.core.logger_builder import LoggerBuilder
from context_logger.core.log_context import LogContext
from context_logger.core.log_entry import ErrorInfo, LogEntry
from context_logger.core.log_level import LogLevel, should_emit
from context_logger.core.logger_config import LoggerConfig

__all__ = [
    "Logger",
    "create_logger",
    "LoggerBuilder",
    "LogContext",
    "ErrorInfo",
    "LogEntry",
    "LogLevel",
    "should_emit",
    "LoggerConfig",
]
