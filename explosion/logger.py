"""Lightweight logging wrapper.

Provides simple leveled logging with environment-based minimum level
(``EXPLOSION_LOG_LEVEL``).
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("EXPLOSION_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout

    def _log(self, level: str, *parts):
        numeric = _LEVELS[level]
        if numeric < _MIN_LEVEL:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        line = f"[{ts}] {level:<5} {self.name}: {msg}\n"
        if self.stream is None:
            return
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError):
            # Closed or detached stream (pythonw, wrapped terminals).
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "explosion") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
