"""Tests for the logging framework."""

import io
import logging

from symrc4.logging import (
    LogEntry,
    LogLevel,
    Rc4Logger,
    get_logger,
    setup_python_logging,
)


def make_logger(level=LogLevel.NORMAL):
    stream = io.StringIO()
    return Rc4Logger(level=level, color=False, stream=stream), stream


def test_level_filters_output():
    logger, stream = make_logger(LogLevel.NORMAL)
    logger.info("shown")
    logger.debug("hidden")
    assert "shown" in stream.getvalue()
    assert "hidden" not in stream.getvalue()
    assert len(logger.get_entries()) == 1


def test_warnings_and_errors_always_shown():
    logger, stream = make_logger(LogLevel.QUIET)
    logger.warning("careful")
    logger.error("broken")
    assert "⚠ careful" in stream.getvalue()
    assert "✗ broken" in stream.getvalue()


def test_timer_logs_at_verbose():
    logger, stream = make_logger(LogLevel.VERBOSE)
    with logger.timer("step", category="prover"):
        pass
    entries = logger.get_entries(category="prover")
    assert len(entries) == 1
    assert entries[0].message.startswith("step: ")
    assert entries[0].context["seconds"] >= 0


def test_counters_are_independent():
    logger, _ = make_logger()
    assert logger.count("swaps") == 1
    assert logger.count("swaps", 4) == 5
    assert logger.count("checks") == 1


def test_entry_format_without_color():
    entry = LogEntry(level=LogLevel.DEBUG, message="hello", category="solver")
    assert entry.format(color=False, show_time=False) == "⚙ [solver] hello"


def test_file_output(tmp_path):
    path = tmp_path / "run.log"
    logger = Rc4Logger(level=LogLevel.NORMAL, color=False, stream=io.StringIO(), file_path=path)
    logger.info("to file")
    logger.warning("also to file")
    logger.close()
    written = path.read_text(encoding="utf-8")
    assert "to file" in written
    assert "⚠ also to file" in written


def test_python_logging_bridge(quiet_logger):
    quiet_logger.set_level(LogLevel.NORMAL)
    setup_python_logging(logging.INFO)
    stdlib_logger = logging.getLogger("symrc4")
    try:
        stdlib_logger.info("bridged")
        entries = get_logger().get_entries(category="python")
        assert [e.message for e in entries] == ["bridged"]
    finally:
        for handler in list(stdlib_logger.handlers):
            stdlib_logger.removeHandler(handler)
