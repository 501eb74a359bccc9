"""Dataclasses describing key strokes, key commands and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


class KeyCommand(str, Enum):
    """Abstract meaning a keymap gives to a single key event."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER_INSERT = "enter_insert"
    OPEN_LINE_BELOW = "open_line_below"
    OPEN_LINE_ABOVE = "open_line_above"
    DELETE = "delete"
    DELETE_CHAR = "delete_char"
    DELETE_TO_LINE_END = "delete_to_line_end"
    PASTE_AFTER = "paste_after"
    PASTE_BEFORE = "paste_before"
    COMMAND_LINE = "command_line"
    QUIT = "quit"
    QUIT_DISCARD = "quit_discard"
    SAVE = "save"
    NEW_LINE = "new_line"
    DELETE_BEHIND = "delete_behind"
    DELETE_AHEAD = "delete_ahead"
    EXIT_TO_NORMAL = "exit_to_normal"


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press used as a lookup key."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"h"``, ``"ESC"`` or ``"ctrl+s"`` notation."""

        if len(token) > 1 and "+" in token:
            *modifiers, key = token.split("+")
            return cls(key, tuple(modifiers))
        return cls(token)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key stroke in one mode with a key command."""

    id: str
    mode: str
    stroke: KeyStroke
    command: KeyCommand
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not isinstance(self.command, KeyCommand):
            raise TypeError("binding command must be a KeyCommand")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "KeyCommand",
    "KeyStroke",
    "Binding",
    "normalize_modifiers",
]
