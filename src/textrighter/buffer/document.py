"""Line-oriented text storage with position-indexed mutation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from textrighter.config import TAB_WIDTH
from textrighter.runtime import telemetry

from .state import Position
from .targets import CharacterUnderCursor, LineAfterCursor, TextTarget, WholeLine
from .validation import BufferValidationError, ensure_column, ensure_line

PathLike = Union[str, Path]


class TextBuffer:
    """Mutable list-of-lines document.

    The buffer knows nothing about cursors beyond the :class:`Position` values
    handed to it. Positions must already be bounded by the caller; the only
    self-healing mutation is inserting into the line one past the end, which
    creates that line. Anything else out of range raises
    :class:`BufferValidationError`.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: List[str] = list(lines)

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(_expand_tabs(line) for line in _split_lines(text))

    @classmethod
    def open(cls, path: PathLike) -> "TextBuffer":
        """Load ``path`` as UTF-8; unreadable files give an empty buffer."""

        with telemetry.span(
            "buffer::open", component="buffer", metadata={"path": str(path)}
        ) as handle:
            try:
                text = Path(path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                handle.add_metadata("fallback", "empty")
                telemetry.get_logger("textrighter.buffer").debug(
                    f"open fell back to empty buffer: {exc}"
                )
                return cls()
            buffer = cls.from_text(text)
            handle.add_metadata("lines", buffer.line_count())
            return buffer

    def save(self, path: PathLike) -> None:
        """Write every line followed by ``\\n``; ``OSError`` propagates."""

        with telemetry.span(
            "buffer::save",
            component="buffer",
            metadata={"path": str(path), "lines": len(self._lines)},
        ):
            with open(path, "w", encoding="utf-8", newline="\n") as handle:
                for line in self._lines:
                    handle.write(line)
                    handle.write("\n")

    # -- mutation ---------------------------------------------------------

    def insert(self, pos: Position, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"insert expects a single character, got {char!r}")
        self.insert_str(pos, char)

    def insert_str(self, pos: Position, text: str) -> None:
        if pos.y == len(self._lines):
            self._lines.append("")
        line = ensure_column(self._lines, pos)
        self._lines[pos.y] = line[: pos.x] + text + line[pos.x :]

    def remove_behind(self, pos: Position) -> Position:
        """Backspace at ``pos`` and return where the cursor ends up."""

        if pos.x == 0:
            if pos.y == 0:
                return pos
            current = ensure_line(self._lines, pos)
            previous = self._lines[pos.y - 1]
            del self._lines[pos.y]
            self._lines[pos.y - 1] = previous + current
            return Position(len(previous), pos.y - 1)

        line = ensure_column(self._lines, pos)
        self._lines[pos.y] = line[: pos.x - 1] + line[pos.x :]
        return Position(pos.x - 1, pos.y)

    def remove_ahead(self, pos: Position) -> Optional[str]:
        """Delete forward at ``pos``.

        Returns the removed character, or ``None`` when the line was joined
        with the next one or the cursor sits at the very end of the document.
        """

        line = ensure_column(self._lines, pos)
        if pos.x == len(line):
            if pos.y >= len(self._lines) - 1:
                return None
            following = self._lines.pop(pos.y + 1)
            self._lines[pos.y] = line + following
            return None

        removed = line[pos.x]
        self._lines[pos.y] = line[: pos.x] + line[pos.x + 1 :]
        return removed

    def add_line(self, pos: Position) -> None:
        """Split the line at ``pos``; the suffix becomes the next line."""

        if pos.y >= len(self._lines):
            return
        line = ensure_column(self._lines, pos)
        self._lines[pos.y] = line[: pos.x]
        self._lines.insert(pos.y + 1, line[pos.x :])

    def add_line_with_indent(self, pos: Position) -> None:
        self._lines.insert(min(pos.y, len(self._lines)), " " * pos.x)

    def delete(self, pos: Position, target: TextTarget) -> str:
        """Remove ``target`` relative to ``pos`` and return the removed text."""

        if isinstance(target, CharacterUnderCursor):
            return self.remove_ahead(pos) or ""

        if isinstance(target, WholeLine):
            ensure_line(self._lines, pos)
            return self._lines.pop(pos.y)

        if isinstance(target, LineAfterCursor):
            line = ensure_column(self._lines, pos)
            self._lines[pos.y] = line[: pos.x]
            return line[pos.x :]

        # Nothing, EntireDocument and SpecificChar do not touch the text yet.
        return ""

    # -- queries ----------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def line_length(self, pos: Position) -> int:
        if pos.y >= len(self._lines):
            return 0
        return len(self._lines[pos.y])

    def line(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise BufferValidationError(f"Line {index} out of range")
        return self._lines[index]

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def render(self, line_index: int, start: int, end: int) -> str:
        line = self._lines[line_index]
        end = min(end, len(line))
        start = min(start, end)
        return line[start:end]

    def __repr__(self) -> str:
        return f"TextBuffer(lines={len(self._lines)})"


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _expand_tabs(line: str) -> str:
    return line.replace("\t", " " * TAB_WIDTH)
