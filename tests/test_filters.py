"""Tests for log filters"""

import pytest

from context_logger import LoggerBuilder, LogLevel
from context_logger.core.log_entry import LogEntry
from context_logger.filters import CallbackFilter, LevelFilter


class TestLevelFilter:
    """Test level range filtering."""

    def test_range(self):
        f = LevelFilter(min_level=LogLevel.INFO, max_level="warning")
        assert not f(LogEntry.build(LogLevel.DEBUG, "d"))
        assert f(LogEntry.build(LogLevel.INFO, "i"))
        assert f(LogEntry.build(LogLevel.WARNING, "w"))
        assert not f(LogEntry.build(LogLevel.ERROR, "e"))

    def test_open_range(self):
        f = LevelFilter()
        assert f.should_log(LogEntry.build(LogLevel.DEBUG, "d"))


class TestCallbackFilter:
    """Test callback filtering."""

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            CallbackFilter("not callable")

    def test_filters_by_context(self):
        lines = []
        logger = (LoggerBuilder()
            .with_console(print_fn=lines.append)
            .with_filter(CallbackFilter(lambda entry: "request_id" in entry.context))
            .build())

        logger.info("no request")
        logger.update_context({"request_id": "r-1"})
        logger.info("in request")

        assert len(lines) == 1
        assert lines[0].endswith("in request")
        assert logger.get_metrics()["filtered"] == 1

    def test_raising_callback_lets_entry_through(self, capsys):
        def broken(entry):
            raise KeyError("oops")

        f = CallbackFilter(broken)
        assert f.should_log(LogEntry.build(LogLevel.INFO, "x")) is True
        assert "Filter callback error" in capsys.readouterr().err
