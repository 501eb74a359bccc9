"""Contract checks for position-indexed buffer mutation."""

from __future__ import annotations

from typing import Sequence

from .state import Position


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-range position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_line(lines: Sequence[str], position: Position) -> str:
    if position.y >= len(lines):
        raise BufferValidationError("Line out of range", position=position)
    return lines[position.y]


def ensure_column(lines: Sequence[str], position: Position) -> str:
    line = ensure_line(lines, position)
    if position.x > len(line):
        raise BufferValidationError("Column out of range", position=position)
    return line
