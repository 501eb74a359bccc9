"""Normal-mode commands that are parsed but not yet turned into actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from textrighter.actions import Direction, Vertical
from textrighter.buffer.targets import (
    CharacterUnderCursor,
    EntireDocument,
    LineAfterCursor,
    Nothing,
    TextTarget,
    WholeLine,
)
from textrighter.keymaps import KeyCommand


@dataclass(frozen=True, slots=True)
class EnterInsert:
    pass


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class OpenLineAndInsert:
    vertical: Vertical


@dataclass(frozen=True, slots=True)
class Invalid:
    pass


@dataclass(frozen=True, slots=True)
class OpenCommandLine:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class Paste:
    direction: Direction


PendingCommand = Union[
    EnterInsert, Move, Quit, OpenLineAndInsert, Invalid, OpenCommandLine, Delete, Paste
]

# What a key command starts when nothing is pending: the command plus, for
# one-key deletes, the target it already implies.
STARTERS: Mapping[KeyCommand, tuple[PendingCommand, Optional[TextTarget]]] = {
    KeyCommand.MOVE_LEFT: (Move(Direction.LEFT), None),
    KeyCommand.MOVE_RIGHT: (Move(Direction.RIGHT), None),
    KeyCommand.MOVE_UP: (Move(Direction.UP), None),
    KeyCommand.MOVE_DOWN: (Move(Direction.DOWN), None),
    KeyCommand.ENTER_INSERT: (EnterInsert(), None),
    KeyCommand.OPEN_LINE_BELOW: (OpenLineAndInsert(Vertical.DOWN), None),
    KeyCommand.OPEN_LINE_ABOVE: (OpenLineAndInsert(Vertical.UP), None),
    KeyCommand.DELETE_CHAR: (Delete(), CharacterUnderCursor()),
    KeyCommand.DELETE_TO_LINE_END: (Delete(), LineAfterCursor()),
    KeyCommand.DELETE: (Delete(), None),
    KeyCommand.PASTE_AFTER: (Paste(Direction.RIGHT), None),
    KeyCommand.PASTE_BEFORE: (Paste(Direction.LEFT), None),
    KeyCommand.COMMAND_LINE: (OpenCommandLine(), None),
    KeyCommand.QUIT: (Quit(), None),
}

# Second-key targets for the two-stage families (d+d, Z+Z, Z+Q).
TARGETS: Mapping[type, Mapping[KeyCommand, TextTarget]] = {
    Delete: {KeyCommand.DELETE: WholeLine()},
    Quit: {
        KeyCommand.QUIT: EntireDocument(),
        KeyCommand.QUIT_DISCARD: Nothing(),
    },
}


def needs_target(command: PendingCommand) -> bool:
    return type(command) in TARGETS


__all__ = [
    "PendingCommand",
    "EnterInsert",
    "Move",
    "Quit",
    "OpenLineAndInsert",
    "Invalid",
    "OpenCommandLine",
    "Delete",
    "Paste",
    "STARTERS",
    "TARGETS",
    "needs_target",
]
