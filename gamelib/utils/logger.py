"""A small levelled logger writing to the console and, optionally, a file."""

from __future__ import annotations

import enum
import functools
import sys
import threading
import time
from typing import IO, TextIO

_RESET = "\033[0m"


class Level(enum.IntEnum):
    """Log severity, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_LABELS = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERROR",
}

_COLORS = {
    Level.DEBUG: "\033[36m",
    Level.INFO: "\033[32m",
    Level.WARNING: "\033[33m",
    Level.ERROR: "\033[31m",
}


class Logger:
    """Thread-safe logger with a minimum level, colour and an optional log file."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.level = Level.INFO
        self.color_enabled = True
        self.console_enabled = True
        self._stream = stream
        self._file: IO[str] | None = None
        self._lock = threading.Lock()

    def open_log_file(self, filename: str) -> None:
        """Append every following record to ``filename``."""
        with self._lock:
            if self._file is not None:
                self._file.close()
            self._file = open(filename, "a", encoding="utf-8")

    def close(self) -> None:
        """Close the log file, if one is open."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def debug(self, message: str) -> None:
        self._log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(Level.INFO, message)

    def warn(self, message: str) -> None:
        self._log(Level.WARNING, message)

    def error(self, message: str) -> None:
        self._log(Level.ERROR, message)

    def _log(self, level: Level, message: str) -> None:
        if self.level > level:
            return
        with self._lock:
            timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
            formatted = f"[{timestamp}] [{_LABELS[level]}] {message}"

            if self.console_enabled:
                stream = self._stream if self._stream is not None else sys.stdout
                if self.color_enabled:
                    stream.write(f"{_COLORS[level]}{formatted}{_RESET}\n")
                else:
                    stream.write(formatted + "\n")
                stream.flush()

            if self._file is not None:
                self._file.write(formatted + "\n")
                self._file.flush()


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """Return the process-wide logger."""
    return Logger()