"""The editor console: command entry that toggles modes and echoes input to the log."""

from __future__ import annotations

import re

from .logger import LogEntry, LogLevel
from .state import EngineState

INPUT_CAPACITY = 255

_NUMBER_CHARS = frozenset("0123456789.-")
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def is_number(text: str) -> bool:
    """True when every character is a digit, a dot or a minus sign."""
    return all(ch in _NUMBER_CHARS for ch in text)


def _parse_number(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        raise ValueError(f"cannot read a number from {text!r}")
    return float(match.group())


class Console:
    """Runs commands typed into the editor console against the shared state."""

    def __init__(self, state: EngineState) -> None:
        self.state = state

    def execute(self, command: str) -> LogEntry | None:
        """Run one line of input; return the log entry it produced, if any.

        Raises ValueError for numeric-looking input that holds no number.
        """
        command = command[:INPUT_CAPACITY]
        state = self.state
        logger = state.logger

        if command == "EditorMode":
            state.editor_mode = not state.editor_mode
            return logger.log(LogLevel.INFO, "Editor mode is ", 0)
        if command == "EditorModeOn":
            if not state.editor_mode:
                state.editor_mode = True
                return logger.log(LogLevel.INFO, "Editor mode is ON", 0)
            return None
        if command == "EditorModeOff":
            if state.editor_mode:
                state.editor_mode = False
                return logger.log(LogLevel.INFO, "Editor mode is OFF", 0)
            return None
        if is_number(command):
            return logger.log(LogLevel.INFO, "Input (number): ", _parse_number(command))
        return logger.log(LogLevel.INFO, command, 0)