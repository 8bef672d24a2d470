"""Engine log: a bounded in-memory history mirrored to the console and a file."""

from __future__ import annotations

import enum
import inspect
import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path

MAX_LOG_COUNT = 100
DEFAULT_LOG_FILE = "log.txt"


class LogLevel(enum.Enum):
    """Severity or category of a log entry."""

    ERROR = enum.auto()
    WARNING = enum.auto()
    INFO = enum.auto()
    DEBUG = enum.auto()
    INPUT = enum.auto()
    CLEAR = enum.auto()
    DESTROY = enum.auto()


_STDERR_LEVELS = frozenset({LogLevel.ERROR, LogLevel.WARNING})


@dataclass(frozen=True)
class LogEntry:
    """One recorded log line."""

    level: LogLevel
    message: str
    num: float = 0.0


class Logger:
    """Keeps the most recent entries and echoes each one to a stream and a file."""

    def __init__(
        self,
        log_file: str | Path | None = DEFAULT_LOG_FILE,
        max_log_count: int = MAX_LOG_COUNT,
    ) -> None:
        self.log_file = Path(log_file) if log_file is not None else None
        self._entries: deque[LogEntry] = deque(maxlen=max_log_count)

    def log(self, level: LogLevel, message: str, num: float = 0.0) -> LogEntry:
        """Record a message with an attached value and return the stored entry."""
        if level in _STDERR_LEVELS:
            text = f"{self._caller_location()} | Description: {message}"
        else:
            text = message
        text += f"| Value  {float(num):.6f}"

        entry = LogEntry(level, text, float(num))
        self._entries.append(entry)

        stream = sys.stderr if level in _STDERR_LEVELS else sys.stdout
        print(f"{level.name}: {text}", file=stream)

        if self.log_file is not None:
            try:
                with self.log_file.open("a", encoding="utf-8") as handle:
                    handle.write(text + "\n")
            except OSError:
                pass
        return entry

    def logs(self) -> tuple[LogEntry, ...]:
        """The retained entries, oldest first."""
        return tuple(self._entries)

    @staticmethod
    def _caller_location() -> str:
        frame = inspect.currentframe()
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "File: <unknown>, Line: 0"
        return f"File: {caller.f_code.co_filename}, Line: {caller.f_lineno}"