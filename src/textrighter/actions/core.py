"""Action values emitted by the interpreter and applied by the session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from textrighter.buffer.targets import TextTarget

ModeName = Literal["normal", "insert", "command"]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Vertical(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class MoveCursor:
    direction: Direction
    count: int = 1


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str


@dataclass(frozen=True, slots=True)
class NewLine:
    count: int = 1


@dataclass(frozen=True, slots=True)
class DeleteBehind:
    count: int = 1


@dataclass(frozen=True, slots=True)
class DeleteAhead:
    count: int = 1


@dataclass(frozen=True, slots=True)
class Delete:
    target: TextTarget
    count: int = 1


@dataclass(frozen=True, slots=True)
class SwitchMode:
    mode: ModeName


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class SaveAndQuit:
    pass


@dataclass(frozen=True, slots=True)
class Paste:
    direction: Direction
    count: int = 1


@dataclass(frozen=True, slots=True)
class CommandPrompt:
    """Ask the host to read one line of command text."""


@dataclass(frozen=True, slots=True)
class OpenLine:
    """Open an indented line above/below the cursor and start inserting."""

    vertical: Vertical


@dataclass(frozen=True, slots=True)
class NoAction:
    pass


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    text: str = ""


Action = Union[
    MoveCursor,
    InsertChar,
    NewLine,
    DeleteBehind,
    DeleteAhead,
    Delete,
    SwitchMode,
    Save,
    Quit,
    SaveAndQuit,
    Paste,
    CommandPrompt,
    OpenLine,
    NoAction,
    InvalidCommand,
]

NO_ACTION = NoAction()

__all__ = [
    "Action",
    "ModeName",
    "Direction",
    "Vertical",
    "MoveCursor",
    "InsertChar",
    "NewLine",
    "DeleteBehind",
    "DeleteAhead",
    "Delete",
    "SwitchMode",
    "Save",
    "Quit",
    "SaveAndQuit",
    "Paste",
    "CommandPrompt",
    "OpenLine",
    "NoAction",
    "InvalidCommand",
    "NO_ACTION",
]
