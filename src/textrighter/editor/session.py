"""Editor session: applies interpreter actions to a buffer and cursor."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Optional, Union

from textrighter.actions import (
    NO_ACTION,
    Action,
    CommandPrompt,
    Delete,
    DeleteAhead,
    DeleteBehind,
    Direction,
    InsertChar,
    InvalidCommand,
    MoveCursor,
    NewLine,
    NoAction,
    OpenLine,
    Paste,
    Quit,
    Save,
    SaveAndQuit,
    SwitchMode,
    Vertical,
)
from textrighter.buffer import (
    CharacterUnderCursor,
    Position,
    RegisterBank,
    TextBuffer,
    WholeLine,
)
from textrighter.buffer.registers import UNNAMED
from textrighter.config import UNNAMED_FILE_FORMAT, WELCOME_MESSAGE
from textrighter.modes import KeyInput, ModalInterpreter
from textrighter.runtime import telemetry

from .status import StatusMessage

PromptKind = Literal["command", "save_as"]


class EditorSession:
    """Single-document editing session.

    Owns the :class:`TextBuffer`, the :class:`ModalInterpreter`, the cursor
    and the unnamed register. Hosts feed it key events and read back the
    cursor, mode, status text and rendered lines. The cursor is clamped after
    every action so the buffer only ever sees in-range positions.
    """

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        *,
        file_name: str = "",
        interpreter: Optional[ModalInterpreter] = None,
        registers: Optional[RegisterBank] = None,
        status: Optional[StatusMessage] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.buffer = buffer or TextBuffer()
        self.file_name = file_name
        self.interpreter = interpreter or ModalInterpreter()
        self.registers = registers or RegisterBank()
        self.status = status or StatusMessage(WELCOME_MESSAGE)
        self.cursor = Position()
        self.should_quit = False
        self.prompt: Optional[PromptKind] = None
        self._deferred_save: Optional[Union[Save, SaveAndQuit]] = None
        self._now = now
        self._handlers: Dict[type, Callable[..., None]] = {
            MoveCursor: self._move_cursor,
            InsertChar: self._insert_char,
            NewLine: self._new_line,
            DeleteBehind: self._delete_behind,
            DeleteAhead: self._delete_ahead,
            Delete: self._delete,
            Paste: self._paste,
            OpenLine: self._open_line,
            SwitchMode: self._switch_mode,
            Save: self._save,
            SaveAndQuit: self._save_and_quit,
            Quit: self._quit,
            CommandPrompt: self._command_prompt,
            InvalidCommand: self._invalid_command,
            NoAction: self._no_action,
        }

    @classmethod
    def open(cls, file_name: Union[str, Path], **kwargs: Any) -> "EditorSession":
        return cls(TextBuffer.open(file_name), file_name=str(file_name), **kwargs)

    @property
    def mode_name(self) -> str:
        return self.interpreter.mode_name

    @property
    def prompting(self) -> bool:
        return self.prompt is not None

    def handle_key(self, key: KeyInput) -> Action:
        action = self.interpreter.process_key(key)
        self.apply(action)
        return action

    def submit_prompt(self, text: str) -> Action:
        """Finish whichever prompt is open with ``text``."""

        if self.prompt == "save_as":
            return self.submit_file_name(text)
        return self.submit_command(text)

    def cancel_prompt(self) -> Action:
        if self.prompt == "save_as":
            return self.cancel_file_name()
        return self.cancel_command()

    def submit_command(self, text: str) -> Action:
        """Finish the ``:`` prompt with ``text`` and apply the result."""

        self.prompt = None
        action = self.interpreter.finish_command(text)
        self.apply(action)
        return action

    def cancel_command(self) -> Action:
        self.prompt = None
        action = self.interpreter.cancel_command()
        self.apply(action)
        return action

    def submit_file_name(self, text: str) -> Action:
        """Name the unnamed document and run the save that asked for it.

        A blank answer keeps the timestamped fallback name.
        """

        name = text.strip()
        if name:
            self.file_name = name
        return self._resume_save()

    def cancel_file_name(self) -> Action:
        return self._resume_save()

    def apply(self, action: Action) -> None:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unsupported action {action!r}")
        with telemetry.span(
            "session::apply",
            component="session",
            metadata={"action": type(action).__name__},
        ):
            handler(action)

    def save(self) -> bool:
        """Write the buffer and report the outcome on the status line."""

        if not self.file_name:
            self.file_name = self._now().strftime(UNNAMED_FILE_FORMAT)
        try:
            self.buffer.save(self.file_name)
        except OSError as exc:
            telemetry.get_logger("textrighter.editor").warning(
                f"save failed for {self.file_name}: {exc}"
            )
            self.status.reset(f"File {self.file_name} unable to be saved: {exc}")
            return False
        self.status.reset(f"{self.file_name} was saved.")
        return True

    def visible_lines(self, top: int, left: int, height: int, width: int) -> List[str]:
        """Rendered slices for a ``height`` x ``width`` viewport; ``~`` past EOF."""

        rows = []
        for index in range(top, top + height):
            if index < self.buffer.line_count():
                rows.append(self.buffer.render(index, left, left + width))
            else:
                rows.append("~")
        return rows

    # -- action handlers ----------------------------------------------------

    def _clamp(self, position: Position) -> Position:
        y = min(position.y, max(self.buffer.line_count() - 1, 0))
        x = min(position.x, self.buffer.line_length(Position(0, y)))
        return Position(x, y)

    def _move_cursor(self, action: MoveCursor) -> None:
        x, y = self.cursor.x, self.cursor.y
        if action.direction is Direction.UP:
            y = max(y - action.count, 0)
        elif action.direction is Direction.DOWN:
            y += action.count
        elif action.direction is Direction.LEFT:
            x = max(x - action.count, 0)
        else:
            x += action.count
        self.cursor = self._clamp(Position(x, y))

    def _insert_char(self, action: InsertChar) -> None:
        self.buffer.insert(self.cursor, action.char)
        self.cursor = self.cursor.with_x(self.cursor.x + 1)

    def _new_line(self, action: NewLine) -> None:
        for _ in range(action.count):
            if self.buffer.is_empty():
                self.buffer.insert_str(self.cursor, "")
            self.buffer.add_line(self.cursor)
            self.cursor = Position(0, self.cursor.y + 1)

    def _delete_behind(self, action: DeleteBehind) -> None:
        for _ in range(action.count):
            self.cursor = self.buffer.remove_behind(self.cursor)

    def _delete_ahead(self, action: DeleteAhead) -> None:
        if self.cursor.y >= self.buffer.line_count():
            return
        for _ in range(action.count):
            self.buffer.remove_ahead(self.cursor)

    def _delete(self, action: Delete) -> None:
        linewise = isinstance(action.target, WholeLine)
        by_char = isinstance(action.target, CharacterUnderCursor)
        removed: List[str] = []
        for _ in range(action.count):
            if self.cursor.y >= self.buffer.line_count():
                break
            # A counted x stops at the line end instead of joining lines.
            at_line_end = self.cursor.x >= self.buffer.line_length(self.cursor)
            if by_char and removed and at_line_end:
                break
            text = self.buffer.delete(self.cursor, action.target)
            if not text and not linewise:
                break
            removed.append(text)

        if removed:
            if linewise:
                self.registers.yank_to(UNNAMED, "\n".join(removed), register_type="line")
            else:
                self.registers.yank_to(UNNAMED, "".join(removed))
        self.cursor = self._clamp(self.cursor)

    def _paste(self, action: Paste) -> None:
        value = self.registers.get(UNNAMED)
        if value.linewise:
            self._paste_lines(value.text.split("\n") * action.count, action.direction)
        elif value.text:
            self._paste_text(value.text * action.count, action.direction)

    def _paste_lines(self, lines: List[str], direction: Direction) -> None:
        row = self.cursor.y + 1 if direction is Direction.RIGHT else self.cursor.y
        row = min(row, self.buffer.line_count())
        for offset, line in enumerate(lines):
            self.buffer.add_line_with_indent(Position(0, row + offset))
            self.buffer.insert_str(Position(0, row + offset), line)
        self.cursor = Position(0, row)

    def _paste_text(self, text: str, direction: Direction) -> None:
        length = self.buffer.line_length(self.cursor)
        column = self.cursor.x
        if direction is Direction.RIGHT and length:
            column = min(column + 1, length)
        self.buffer.insert_str(self.cursor.with_x(column), text)
        self.cursor = self.cursor.with_x(column + len(text) - 1)

    def _open_line(self, action: OpenLine) -> None:
        indent = self.cursor.x
        row = self.cursor.y + 1 if action.vertical is Vertical.DOWN else self.cursor.y
        row = min(row, self.buffer.line_count())
        self.buffer.add_line_with_indent(Position(indent, row))
        self.cursor = Position(indent, row)

    def _switch_mode(self, action: SwitchMode) -> None:
        del action
        self.cursor = self._clamp(self.cursor)

    def _ask_file_name(self, action: Union[Save, SaveAndQuit]) -> bool:
        """Open the ``Save as`` prompt when the document has no name yet."""

        if self.file_name:
            return False
        self.prompt = "save_as"
        self._deferred_save = action
        return True

    def _resume_save(self) -> Action:
        self.prompt = None
        action, self._deferred_save = self._deferred_save, None
        if action is None:
            return NO_ACTION
        if not self.file_name:
            self.file_name = self._now().strftime(UNNAMED_FILE_FORMAT)
        self.apply(action)
        return action

    def _save(self, action: Save) -> None:
        if not self._ask_file_name(action):
            self.save()

    def _save_and_quit(self, action: SaveAndQuit) -> None:
        if self._ask_file_name(action):
            return
        if self.save():
            self.should_quit = True

    def _quit(self, action: Quit) -> None:
        del action
        self.should_quit = True

    def _command_prompt(self, action: CommandPrompt) -> None:
        del action
        self.prompt = "command"

    def _invalid_command(self, action: InvalidCommand) -> None:
        self.status.reset(f"Not an editor command: {action.text}")

    def _no_action(self, action: NoAction) -> None:
        del action


__all__ = ["EditorSession"]
