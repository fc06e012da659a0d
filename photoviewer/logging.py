"""Console logging with elapsed time, frame number and process id.

Several viewer processes may share one console (one per command-line
argument), so every line carries the pid of the process that wrote it.
"""

from __future__ import annotations
import os
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Writes ``[pid elapsed frame] message`` lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self._pid: int = os.getpid()
        self._stream = stream

    @property
    def frame(self) -> int:
        return self._frame

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since the logger was created."""
        return time.perf_counter() - self._start_time

    def format(self, msg: str) -> str:
        return f"[{self._pid} {self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        line = self.format(msg)
        for stream in (self._stream or sys.stdout, sys.stderr):
            if stream is None:
                # pythonw has no console streams
                continue
            try:
                stream.write(line)
                stream.flush()
                return
            except (OSError, ValueError):
                continue

    def __call__(self, msg: str) -> None:
        self.log(msg)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the process-wide logger."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    get_logger().log(msg)


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Monotonic time in seconds, used for drag sampling."""
    return time.perf_counter()
