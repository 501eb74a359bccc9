"""Textual adapter wiring an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textrighter.actions import NO_ACTION, Action
from textrighter.buffer import Position
from textrighter.config import PROMPT_LABELS, mode_config
from textrighter.editor import EditorSession
from textrighter.modes import KeyInput

_SPECIAL_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "tab": "TAB",
}
_COMMAND_MODIFIERS = {"ctrl", "alt"}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_textual_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual key name (``"ctrl+s"``, ``"escape"``) to a KeyInput.

    Returns ``None`` for keys the editor has no use for.
    """

    *modifiers, name = key.split("+") if len(key) > 1 else [key]
    if name in _SPECIAL_KEYS:
        return KeyInput(_SPECIAL_KEYS[name], tuple(modifiers))
    if _COMMAND_MODIFIERS.intersection(modifiers) and len(name) == 1:
        return KeyInput(name, tuple(modifiers))
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(character)
    return None


def mark_indent(row: str, marker: str = ".") -> tuple[str, int]:
    """Replace a row's leading spaces with ``marker``.

    Returns the display text and how many leading cells were replaced, so
    the host can dim them. Lengths are preserved.
    """

    indent = len(row) - len(row.lstrip(" "))
    return marker * indent + row[indent:], indent


@dataclass(slots=True)
class Viewport:
    """Top-left corner of the visible window into the buffer."""

    top: int = 0
    left: int = 0

    def follow(self, cursor: Position, height: int, width: int) -> None:
        """Scroll just enough to keep ``cursor`` inside ``height`` x ``width``."""

        if cursor.y < self.top:
            self.top = cursor.y
        elif height > 0 and cursor.y >= self.top + height:
            self.top = cursor.y - height + 1
        if cursor.x < self.left:
            self.left = cursor.x
        elif width > 0 and cursor.x >= self.left + width:
            self.left = cursor.x - width + 1


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[EditorSession], None]
    update_status: Callable[[str], None] = _noop
    update_message: Callable[[str], None] = _noop
    open_prompt: Callable[[str], None] = _noop
    close_prompt: Callable[[], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an EditorSession to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.viewport = Viewport()
        self._prompt_kind: Optional[str] = None
        self.refresh()

    def handle_textual_key(self, key: str, character: Optional[str] = None) -> Action:
        key_input = normalize_textual_key(key, character)
        if key_input is None:
            return NO_ACTION
        self.hooks.log(f"key -> {key_input.stroke.token} mode={self.session.mode_name}")
        action = self.session.handle_key(key_input)
        self.hooks.log(f"action <- {action!r}")
        self.refresh()
        return action

    def submit_prompt(self, text: str) -> Action:
        action = self.session.submit_prompt(text)
        self.refresh()
        return action

    def cancel_prompt(self) -> Action:
        action = self.session.cancel_prompt()
        self.refresh()
        return action

    def status_line(self) -> str:
        name = self.session.file_name or "[No Name]"
        label = mode_config(self.session.mode_name).label
        return f"{name}  {label}  {self.session.cursor.file_position()}"

    def message_line(self) -> str:
        status = self.session.status
        return status.text if status.is_showing() else ""

    def refresh(self) -> None:
        self.hooks.update_buffer(self.session)
        self.hooks.update_status(self.status_line())
        self.hooks.update_message(self.message_line())
        kind = self.session.prompt
        if kind != self._prompt_kind:
            self._prompt_kind = kind
            if kind is None:
                self.hooks.close_prompt()
            else:
                self.hooks.open_prompt(PROMPT_LABELS[kind])
        if self.session.should_quit:
            self.hooks.request_exit()


__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "Viewport",
    "mark_indent",
    "normalize_textual_key",
]
