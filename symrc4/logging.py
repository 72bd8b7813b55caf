"""Logging framework for symrc4.
Provides structured logging with configurable verbosity and output formats.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Log levels for symrc4."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3
    TRACE = 4


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GRAY = "\033[90m"


def supports_color(stream: TextIO) -> bool:
    """Check if the stream supports ANSI colors."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass
class LogEntry:
    """A log entry with metadata."""

    level: LogLevel
    message: str
    category: str = "general"
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)

    def format(self, color: bool = True, show_time: bool = True) -> str:
        """Format the log entry for display."""
        parts = []
        if show_time:
            elapsed = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
            if color:
                parts.append(f"{Colors.GRAY}{elapsed}{Colors.RESET}")
            else:
                parts.append(elapsed)
        level_str = self._level_str(color)
        if level_str:
            parts.append(level_str)
        if self.category != "general":
            if color:
                parts.append(f"{Colors.CYAN}[{self.category}]{Colors.RESET}")
            else:
                parts.append(f"[{self.category}]")
        parts.append(self.message)
        return " ".join(parts)

    def _level_str(self, color: bool) -> str:
        """Get level indicator string."""
        if self.level == LogLevel.QUIET:
            return ""
        indicators = {
            LogLevel.NORMAL: ("•", Colors.WHITE),
            LogLevel.VERBOSE: ("→", Colors.BLUE),
            LogLevel.DEBUG: ("⚙", Colors.MAGENTA),
            LogLevel.TRACE: ("⋯", Colors.GRAY),
        }
        char, col = indicators.get(self.level, ("", ""))
        if color:
            return f"{col}{char}{Colors.RESET}"
        return char


class Rc4Logger:
    """Main logger for symrc4."""

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        color: bool = True,
        stream: TextIO | None = None,
        file_path: Path | None = None,
    ):
        self.level = level
        self._stream = stream or sys.stderr
        self._color = color and supports_color(self._stream)
        self._file_handle: TextIO | None = None
        self._entries: list[LogEntry] = []
        self._counters: dict[str, int] = {}
        if file_path is not None:
            self.open_file(file_path)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self.level = level

    def _should_log(self, level: LogLevel) -> bool:
        """Check if a message at this level should be logged."""
        return level <= self.level

    def _emit(self, entry: LogEntry) -> None:
        """Record an entry and write it if the level allows."""
        if not self._should_log(entry.level):
            return
        self._entries.append(entry)
        self._stream.write(entry.format(color=self._color) + "\n")
        self._stream.flush()
        if self._file_handle:
            self._file_handle.write(entry.format(color=False) + "\n")
            self._file_handle.flush()

    def log(
        self,
        level: LogLevel,
        message: str,
        category: str = "general",
        **context: Any,
    ) -> None:
        """Log a message at the specified level."""
        self._emit(LogEntry(level=level, message=message, category=category, context=context))

    def info(self, message: str, **context: Any) -> None:
        """Log an info message."""
        self.log(LogLevel.NORMAL, message, **context)

    def verbose(self, message: str, **context: Any) -> None:
        """Log a verbose message."""
        self.log(LogLevel.VERBOSE, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        """Log a debug message."""
        self.log(LogLevel.DEBUG, message, **context)

    def trace(self, message: str, **context: Any) -> None:
        """Log a trace message."""
        self.log(LogLevel.TRACE, message, **context)

    def _mark(self, symbol: str, color: str, message: str) -> None:
        """Write a one-line status message, bypassing the entry list."""
        shown = f"{color}{symbol}{Colors.RESET}" if self._color else symbol
        self._stream.write(f"{shown} {message}\n")
        self._stream.flush()
        if self._file_handle:
            self._file_handle.write(f"{symbol} {message}\n")
            self._file_handle.flush()

    def success(self, message: str) -> None:
        """Log a success message with green checkmark."""
        if self._should_log(LogLevel.NORMAL):
            self._mark("✓", Colors.GREEN, message)

    def warning(self, message: str) -> None:
        """Log a warning message (always shown)."""
        self._mark("⚠", Colors.YELLOW, message)

    def error(self, message: str) -> None:
        """Log an error message (always shown)."""
        self._mark("✗", Colors.RED, message)

    @contextmanager
    def timer(self, name: str, category: str = "timing"):
        """Context manager for timing operations."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.verbose(f"{name}: {elapsed:.3f}s", category=category, seconds=elapsed)

    def count(self, name: str, increment: int = 1) -> int:
        """Bump a named counter; returns the new value."""
        self._counters[name] = self._counters.get(name, 0) + increment
        return self._counters[name]

    def get_entries(
        self,
        level: LogLevel | None = None,
        category: str | None = None,
    ) -> list[LogEntry]:
        """Get logged entries, optionally filtered."""
        entries = self._entries
        if level is not None:
            entries = [e for e in entries if e.level == level]
        if category is not None:
            entries = [e for e in entries if e.category == category]
        return entries

    def open_file(self, path: Path) -> None:
        """Open a file for logging."""
        self._file_handle = open(path, "w", encoding="utf-8")

    def close(self) -> None:
        """Close any open file handles."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


_logger: Rc4Logger | None = None


def get_logger() -> Rc4Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Rc4Logger()
    return _logger


def set_logger(logger: Rc4Logger) -> None:
    """Set the global logger instance."""
    global _logger
    _logger = logger


def configure_logging(
    level: LogLevel = LogLevel.NORMAL,
    color: bool = True,
    file_path: Path | None = None,
    stream: TextIO | None = None,
) -> Rc4Logger:
    """Configure and return the global logger."""
    global _logger
    _logger = Rc4Logger(level=level, color=color, stream=stream, file_path=file_path)
    return _logger


class PythonLoggingBridge(logging.Handler):
    """Bridge the symrc4 logger to Python's logging module."""

    def __init__(self, rc4_logger: Rc4Logger):
        super().__init__()
        self.rc4_logger = rc4_logger
        self._level_map = {
            logging.DEBUG: LogLevel.DEBUG,
            logging.INFO: LogLevel.NORMAL,
        }

    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        if record.levelno >= logging.ERROR:
            self.rc4_logger.error(message)
        elif record.levelno >= logging.WARNING:
            self.rc4_logger.warning(message)
        else:
            level = self._level_map.get(record.levelno, LogLevel.NORMAL)
            self.rc4_logger.log(level, message, category="python")


def setup_python_logging(level: int = logging.INFO) -> None:
    """Route records from the ``symrc4`` stdlib logger to the symrc4 logger."""
    logger = logging.getLogger("symrc4")
    logger.setLevel(level)
    logger.addHandler(PythonLoggingBridge(get_logger()))


__all__ = [
    "LogLevel",
    "LogEntry",
    "Colors",
    "Rc4Logger",
    "get_logger",
    "set_logger",
    "configure_logging",
    "setup_python_logging",
    "supports_color",
]
