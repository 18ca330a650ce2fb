"""
Main Logger class - synchronous structured logger

Every call runs filter -> build -> format -> write on the calling thread.
"""

from __future__ import annotations
from typing import Any, List, Mapping, Optional, Tuple, Union

from context_logger.core.log_context import LogContext
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel, should_emit
from context_logger.core.logger_config import LoggerConfig
from context_logger.formatters.text_formatter import TextFormatter
from context_logger.relay import report_error
from context_logger.writers.console_writer import ConsoleWriter
from context_logger.writers.database_writer import DatabaseWriter
from context_logger.writers.file_writer import FileWriter


class Logger:
    """
    Main logger class.

    Owns its context, its minimum level and its writers. Nothing raised
    inside a log call reaches the caller: a failing writer is reported on
    stderr and the remaining writers still receive the entry.

    Sharing one Logger between threads is fine for logging; callers must
    synchronise update_context/clear_context against concurrent log calls
    themselves.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._min_level = LogLevel.coerce(self._config.min_level)
        self._context = LogContext(self._config.context)
        self._line_formatter = TextFormatter(format_fn=self._config.format_fn)
        self._writers: List[Any] = []
        self._filters: List[Any] = []
        self._metrics = {"logged": 0, "filtered": 0, "writer_errors": 0}
        self._closed = False

        self._create_writers()

    def _create_writers(self):
        """
        Attach the writers enabled by the configuration.

        If one writer cannot be created, the ones already attached are
        closed before the error propagates.
        """
        config = self._config
        try:
            if config.console_output:
                self.add_writer(ConsoleWriter(
                    print_fn=config.print_fn,
                    colored=config.colored_output,
                    formatter=self._line_formatter,
                ))
            if config.file_path:
                self.add_writer(FileWriter(config.file_path, encoding=config.encoding))
            if config.database_enabled:
                self.add_writer(DatabaseWriter(config.db_engine, config.table_name))
        except Exception:
            self.close()
            raise

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @min_level.setter
    def min_level(self, level: Union[LogLevel, str]) -> None:
        self._min_level = LogLevel.coerce(level)

    @property
    def context(self) -> dict:
        """Snapshot of the current context."""
        return self._context.snapshot()

    @property
    def writers(self) -> Tuple[Any, ...]:
        return tuple(self._writers)

    def add_writer(self, writer: Any) -> None:
        """Add a log writer."""
        self._writers.append(writer)

    def remove_writer(self, writer: Any) -> bool:
        """
        Detach a writer without closing it.

        Returns:
            True if the writer was attached
        """
        try:
            self._writers.remove(writer)
        except ValueError:
            return False
        return True

    def add_filter(self, log_filter: Any) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Filter instance with should_log(entry) method
        """
        self._filters.append(log_filter)

    def update_context(self, partial: Mapping[str, Any]) -> None:
        """Merge keys into the context used by subsequent entries."""
        self._context.update(partial)

    def clear_context(self) -> None:
        """Remove every context key."""
        self._context.clear()

    def is_enabled_for(self, level: LogLevel) -> bool:
        return should_emit(level, self._min_level)

    def build_entry(
        self,
        level: LogLevel,
        message: Any,
        data: Any = None,
        error: Any = None,
    ) -> Optional[LogEntry]:
        """
        Build the entry a log call would emit.

        Returns:
            LogEntry, or None if the level or a filter rejects it
        """
        if not self.is_enabled_for(level):
            return None

        entry = LogEntry.build(
            level,
            message,
            data=data,
            error=error,
            context=self._context.snapshot(),
        )

        for f in self._filters:
            if not f.should_log(entry):
                return None
        return entry

    def format_line(self, entry: LogEntry) -> str:
        """Line rendering used by the console writer."""
        return self._line_formatter.format(entry)

    def log(
        self,
        level: LogLevel,
        message: Any,
        data: Any = None,
        error: Any = None,
    ) -> None:
        """Log a message."""
        try:
            entry = self.build_entry(LogLevel.coerce(level), message, data, error)
        except Exception as e:
            report_error(f"Logger error: {e}")
            return

        if entry is None:
            self._metrics["filtered"] += 1
            return

        self._dispatch(entry)
        self._metrics["logged"] += 1

    def _dispatch(self, entry: LogEntry):
        """Write entry to all writers, isolating failures."""
        for writer in tuple(self._writers):
            try:
                writer.write(entry)
            except Exception as e:
                self._metrics["writer_errors"] += 1
                report_error(f"Writer error ({writer!r}): {e}")

    def debug(self, message: Any, data: Any = None, error: Any = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, data, error)

    def info(self, message: Any, data: Any = None, error: Any = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, data, error)

    def warn(self, message: Any, data: Any = None, error: Any = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, data, error)

    warning = warn

    def error(self, message: Any, data: Any = None, error: Any = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, data, error)

    def flush(self):
        """Flush all writers."""
        for writer in self._writers:
            if hasattr(writer, 'flush'):
                try:
                    writer.flush()
                except Exception as e:
                    report_error(f"Writer error ({writer!r}): {e}")

    def close(self):
        """Flush and close all writers."""
        if self._closed:
            return
        self._closed = True

        self.flush()
        for writer in self._writers:
            if hasattr(writer, 'close'):
                try:
                    writer.close()
                except Exception as e:
                    report_error(f"Writer error ({writer!r}): {e}")

    shutdown = close

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(name='{self.name}', level={self._min_level})"


def create_logger(**options: Any) -> Logger:
    """
    Create a logger from keyword options.

    Accepts the LoggerConfig fields, e.g.::

        logger = create_logger(min_level="DEBUG", file_path="logs/app.jsonl")

    There is no global logger; callers keep the returned instance.
    """
    return Logger(LoggerConfig(**options))
