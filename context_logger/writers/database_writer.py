"""
Database writer

Inserts one row per log entry into a relational table through SQLAlchemy
Core. The table is created on first use when it does not exist yet.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import Column, MetaData, Table, Text, create_engine, func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.formatters.record_formatter import RecordFormatter

_JSON_COLUMNS = ("context", "data", "error")


class DatabaseWriter:
    """
    Write logs to a relational table.

    Columns: ``timestamp``, ``level``, ``message``, ``context`` (JSON text),
    ``data`` and ``error`` (JSON text, nullable). Every entry is inserted in
    its own transaction; concurrent inserts are serialised by the database.

    Context is stored as plain JSON text rather than an engine-specific JSON
    type, so :meth:`fetch` decodes it and applies context filters in Python.
    """

    def __init__(
        self,
        engine: Union[Engine, str],
        table_name: str,
        formatter: Optional[RecordFormatter] = None,
    ):
        """
        Initialize database writer.

        Args:
            engine: SQLAlchemy Engine or database URL
            table_name: Name of the log table
            formatter: Record formatter (default: RecordFormatter)

        Example:
            from sqlalchemy import create_engine

            writer = DatabaseWriter(create_engine("sqlite:///logs.db"), "app_logs")
        """
        if not table_name:
            raise ValueError("table_name cannot be empty")

        self._owns_engine = isinstance(engine, str)
        self.engine: Engine = create_engine(engine) if self._owns_engine else engine
        self.table_name = table_name
        self.formatter = formatter or RecordFormatter()

        self._metadata = MetaData()
        self.table = Table(
            table_name,
            self._metadata,
            Column("timestamp", Text, nullable=False),
            Column("level", Text, nullable=False),
            Column("message", Text, nullable=False),
            Column("context", Text, nullable=False),
            Column("data", Text, nullable=True),
            Column("error", Text, nullable=True),
        )
        self._lock = threading.Lock()
        self._table_ready = False

    def _ensure_table(self) -> None:
        """Create the log table if it does not exist."""
        if self._table_ready:
            return
        with self._lock:
            if self._table_ready:
                return
            try:
                self._metadata.create_all(self.engine, checkfirst=True)
            except SQLAlchemyError:
                # Another process may have created it between check and create
                if not inspect(self.engine).has_table(self.table_name):
                    raise
            self._table_ready = True

    def write(self, entry: LogEntry):
        """Insert log entry as one row."""
        row = self.formatter.to_record(entry)
        self._ensure_table()
        with self.engine.begin() as conn:
            conn.execute(self.table.insert().values(**row))

    def count(self, level: Optional[Union[LogLevel, str]] = None) -> int:
        """
        Count stored rows.

        Args:
            level: Only count rows at this level

        Returns:
            Number of rows
        """
        self._ensure_table()
        stmt = select(func.count()).select_from(self.table)
        if level is not None:
            stmt = stmt.where(self.table.c.level == LogLevel.coerce(level).name)
        with self.engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one())

    def fetch(
        self,
        level: Optional[Union[LogLevel, str]] = None,
        context: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Read stored rows back with their JSON columns decoded.

        Args:
            level: Only return rows at this level
            context: Only return rows whose context contains these pairs
            limit: Maximum number of rows returned

        Returns:
            List of row dictionaries ordered by timestamp; entries within
            the same millisecond come back in engine order
        """
        self._ensure_table()
        stmt = select(self.table).order_by(self.table.c.timestamp)
        if level is not None:
            stmt = stmt.where(self.table.c.level == LogLevel.coerce(level).name)
        if limit is not None and not context:
            stmt = stmt.limit(limit)

        with self.engine.connect() as conn:
            rows = [dict(row._mapping) for row in conn.execute(stmt)]

        results = []
        for row in rows:
            for key in _JSON_COLUMNS:
                if row[key] is not None:
                    row[key] = json.loads(row[key])
            if context and not _contains(row["context"] or {}, context):
                continue
            results.append(row)
            if limit is not None and len(results) >= limit:
                break
        return results

    def flush(self):
        """Rows are committed on write; nothing is buffered."""

    def close(self):
        """Dispose the engine if this writer created it."""
        if self._owns_engine:
            self.engine.dispose()

    def __repr__(self) -> str:
        return f"DatabaseWriter(table='{self.table_name}')"


def _contains(values: Mapping[str, Any], expected: Mapping[str, Any]) -> bool:
    return all(key in values and values[key] == value for key, value in expected.items())
