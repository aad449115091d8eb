"""A small thread-safe file logger with severity levels."""

from __future__ import annotations

import os
import sys
import threading
import time
from enum import IntEnum
from typing import TextIO


class Level(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


class Logger:
    """Appends timestamped messages to a file.

    If the file cannot be opened a notice goes to stderr and every later
    message is silently dropped.
    """

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._lock = threading.Lock()
        self._min_level = Level.DEBUG
        self._file: TextIO | None
        try:
            self._file = open(filename, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print("Cannot open log file!", file=sys.stderr)

    @property
    def level(self) -> Level:
        """The lowest level that is written."""
        return self._min_level

    def log(self, level: Level, message: str) -> None:
        """Write one line for ``message`` if the level passes the filter."""
        if self._file is None or not self.should_log(level):
            return
        with self._lock:
            stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
            self._file.write(f"[{stamp}] [{Level(level).name}] {message}\n")
            self._file.flush()

    def set_level(self, level: Level) -> None:
        """Set the lowest level that is written."""
        self._min_level = Level(level)

    def should_log(self, level: Level) -> bool:
        """Return whether a message of ``level`` would be written."""
        return level >= self._min_level

    def close(self) -> None:
        """Close the underlying file; later messages are dropped."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()