"""Cursor position value shared by the buffer and its callers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A (column, line) pair; ``x`` is a char offset, ``y`` a line index."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position cannot be negative: ({self.x}, {self.y})")

    def with_x(self, x: int) -> "Position":
        return Position(x, self.y)

    def with_y(self, y: int) -> "Position":
        return Position(self.x, y)

    def file_position(self) -> str:
        """1-based ``column, line`` label used by status bars."""

        return f"{self.x + 1:2}, {self.y + 1:2}"

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"
