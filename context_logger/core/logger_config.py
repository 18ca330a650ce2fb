"""
Logger configuration management
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from context_logger.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Sinks are enabled by the fields that configure them: the console unless
    ``console_output`` is False, a file sink when ``file_path`` is set and a
    database sink when both ``db_engine`` and ``table_name`` are set.
    """

    # Basic settings
    name: str = "logger"
    min_level: Union[LogLevel, str] = LogLevel.INFO

    # Console settings
    console_output: bool = True
    colored_output: bool = True
    print_fn: Optional[Callable[[str], Any]] = None
    format_fn: Optional[Callable[..., str]] = None

    # File settings
    file_path: Optional[Path] = None
    encoding: str = "utf-8"

    # Database settings (engine or URL, plus table name)
    db_engine: Any = None
    table_name: Optional[str] = None

    # Initial context
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.min_level = LogLevel.coerce(self.min_level)

        if (self.db_engine is None) != (self.table_name is None):
            raise ValueError("db_engine and table_name must be given together")
        if self.table_name is not None and not str(self.table_name).strip():
            raise ValueError("table_name cannot be empty")

        if self.print_fn is not None and not callable(self.print_fn):
            raise TypeError("print_fn must be callable")
        if self.format_fn is not None and not callable(self.format_fn):
            raise TypeError("format_fn must be callable")

        if self.context is None:
            self.context = {}
        elif not isinstance(self.context, Mapping):
            raise TypeError("context must be a mapping")

        # Convert file_path to Path if it's a string
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)

    @property
    def database_enabled(self) -> bool:
        return self.db_engine is not None and self.table_name is not None

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(min_level=LogLevel.DEBUG, colored_output=True)

    @classmethod
    def production_config(cls, file_path: Optional[str] = None) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARNING,
            console_output=False,
            file_path=file_path,
        )

    @classmethod
    def silent_config(cls) -> "LoggerConfig":
        """Configuration with no sinks at all, useful in tests."""
        return cls(console_output=False)
