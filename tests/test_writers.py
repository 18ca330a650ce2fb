"""Tests for console and file writers"""

import io
import json
import threading

from context_logger import LogLevel, create_logger
from context_logger.core.log_entry import LogEntry
from context_logger.formatters import TextFormatter
from context_logger.relay import relay_message
from context_logger.writers import ConsoleWriter, FileWriter


class TestRelay:
    """Test the parallel-safe relay."""

    def test_single_line_written(self):
        stream = io.StringIO()
        relay_message("hello", stream)
        assert stream.getvalue() == "hello\n"

    def test_defaults_to_stderr(self, capsys):
        relay_message("to stderr")
        assert capsys.readouterr().err == "to stderr\n"


class TestConsoleWriter:
    """Test console output."""

    def test_print_fn_receives_plain_line(self):
        lines = []
        writer = ConsoleWriter(print_fn=lines.append, colored=True)
        writer.write(LogEntry.build(LogLevel.ERROR, "failed"))
        assert len(lines) == 1
        assert lines[0].endswith("ERROR failed")
        assert "\033[" not in lines[0]

    def test_colored_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(colored=True, stream=stream)
        writer.write(LogEntry.build(LogLevel.WARNING, "careful"))
        output = stream.getvalue()
        assert output.startswith(LogLevel.WARNING.color_code)
        assert output.endswith("\033[0m\n")

    def test_uncolored_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(colored=False, stream=stream)
        writer.write(LogEntry.build(LogLevel.INFO, "plain"))
        assert stream.getvalue().endswith(" INFO plain\n")

    def test_custom_formatter(self):
        lines = []
        writer = ConsoleWriter(print_fn=lines.append, formatter=TextFormatter("{message}"))
        writer.write(LogEntry.build(LogLevel.INFO, "only message"))
        assert lines == ["only message"]


class TestFileWriter:
    """Test newline-delimited JSON file output."""

    def test_creates_file_and_parents(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "app.jsonl"
        writer = FileWriter(path)
        writer.write(LogEntry.build(LogLevel.INFO, "first"))
        writer.close()
        assert path.exists()

    def test_lines_in_call_order(self, tmp_path):
        path = tmp_path / "app.jsonl"
        logger = create_logger(console_output=False, file_path=path, min_level="DEBUG")
        for i in range(5):
            logger.debug(f"message {i}", data={"i": i})
        logger.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 5
        documents = [json.loads(line) for line in lines]
        assert [d["message"] for d in documents] == [f"message {i}" for i in range(5)]
        assert [d["data"]["i"] for d in documents] == list(range(5))
        assert set(documents[0]) == {"timestamp", "level", "message", "context", "data", "error"}

    def test_reopen_appends(self, tmp_path):
        path = tmp_path / "app.jsonl"
        for run in range(2):
            logger = create_logger(console_output=False, file_path=path)
            logger.info(f"run {run}")
            logger.close()

        messages = [json.loads(line)["message"] for line in path.read_text().splitlines()]
        assert messages == ["run 0", "run 1"]

    def test_context_and_error_written(self, tmp_path):
        path = tmp_path / "app.jsonl"
        logger = create_logger(console_output=False, file_path=path, context={"job": 7})
        try:
            raise ValueError("bad value")
        except ValueError as exc:
            logger.error("job failed", error=exc)
        logger.close()

        document = json.loads(path.read_text().strip())
        assert document["context"] == {"job": 7}
        assert document["error"]["type"] == "ValueError"
        assert document["error"]["message"] == "bad value"
        assert "Traceback" in document["error"]["trace"]

    def test_concurrent_threads_do_not_interleave(self, tmp_path):
        path = tmp_path / "threads.jsonl"
        writer = FileWriter(path)

        def worker(n):
            for i in range(50):
                writer.write(LogEntry.build(LogLevel.INFO, f"t{n}-{i}", data={"pad": "x" * 200}))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        writer.close()

        lines = path.read_text().splitlines()
        assert len(lines) == 200
        for line in lines:
            json.loads(line)

    def test_unencodable_payload_still_written(self, tmp_path):
        path = tmp_path / "app.jsonl"
        logger = create_logger(console_output=False, file_path=path)
        logger.info("bad filename", data={"path": "report\udcff.csv"})
        logger.info("next")
        logger.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["data"] == {"path": "report\udcff.csv"}
        assert json.loads(lines[1])["message"] == "next"
        assert logger.get_metrics()["writer_errors"] == 0
