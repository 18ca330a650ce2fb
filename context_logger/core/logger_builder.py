"""Logger builder pattern"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from context_logger.core.logger import Logger
from context_logger.core.logger_config import LoggerConfig
from context_logger.core.log_level import LogLevel


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._level: Union[LogLevel, str] = LogLevel.INFO
        self._console_enabled = True
        self._colored = True
        self._print_fn: Optional[Callable[[str], Any]] = None
        self._format_fn: Optional[Callable[..., str]] = None
        self._file_path: Optional[Path] = None
        self._encoding = "utf-8"
        self._db_engine: Any = None
        self._table_name: Optional[str] = None
        self._context: Dict[str, Any] = {}
        self._custom_writers: List[Any] = []
        self._custom_filters: List[Any] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_console(
        self,
        colored: bool = True,
        print_fn: Optional[Callable[[str], Any]] = None,
    ) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            colored: Color lines by level (ignored when print_fn is given)
            print_fn: Custom function receiving each formatted line
        """
        self._console_enabled = True
        self._colored = colored
        self._print_fn = print_fn
        return self

    def without_console(self) -> "LoggerBuilder":
        """Disable console output."""
        self._console_enabled = False
        return self

    def with_format(self, format_fn: Callable[..., str]) -> "LoggerBuilder":
        """Replace the console line rendering with ``format_fn(entry)``."""
        self._format_fn = format_fn
        return self

    def with_file(self, filepath: Union[str, Path], encoding: str = "utf-8") -> "LoggerBuilder":
        """Enable newline-delimited JSON file output."""
        self._file_path = Path(filepath)
        self._encoding = encoding
        return self

    def with_database(self, engine: Any, table_name: str) -> "LoggerBuilder":
        """
        Enable database output.

        Args:
            engine: SQLAlchemy Engine or database URL
            table_name: Log table, created on first write if missing

        Example:
            logger = (LoggerBuilder()
                .with_database("sqlite:///logs.db", "app_logs")
                .build())
        """
        self._db_engine = engine
        self._table_name = table_name
        return self

    def with_context(self, context: Mapping[str, Any]) -> "LoggerBuilder":
        """Merge keys into the initial context."""
        self._context.update(context)
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining

        Example:
            from context_logger.filters import LevelFilter

            logger = (LoggerBuilder()
                .with_level(LogLevel.DEBUG)
                .with_filter(LevelFilter(max_level=LogLevel.INFO))
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Object with a write(entry) method

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build_config(self) -> LoggerConfig:
        """Validate the collected options into a LoggerConfig."""
        return LoggerConfig(
            name=self._name,
            min_level=self._level,
            console_output=self._console_enabled,
            colored_output=self._colored,
            print_fn=self._print_fn,
            format_fn=self._format_fn,
            file_path=self._file_path,
            encoding=self._encoding,
            db_engine=self._db_engine,
            table_name=self._table_name,
            context=dict(self._context),
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self.build_config())

        for writer in self._custom_writers:
            logger.add_writer(writer)

        for log_filter in self._custom_filters:
            logger.add_filter(log_filter)

        return logger
