"""Action vocabulary shared by the interpreter and the editor session."""

from .command import evaluate_command_text
from .core import (
    NO_ACTION,
    Action,
    CommandPrompt,
    Delete,
    DeleteAhead,
    DeleteBehind,
    Direction,
    InsertChar,
    InvalidCommand,
    ModeName,
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
    "evaluate_command_text",
]
