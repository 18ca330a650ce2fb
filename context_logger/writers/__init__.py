"""Writers module - Log output handlers"""

from context_logger.writers.console_writer import ConsoleWriter
from context_logger.writers.file_writer import FileWriter
from context_logger.writers.database_writer import DatabaseWriter

__all__ = ["ConsoleWriter", "FileWriter", "DatabaseWriter"]
