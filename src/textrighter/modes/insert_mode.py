"""Insert mode: printable keys insert text, bound keys edit and move."""

from __future__ import annotations

from typing import Mapping

from textrighter.actions import (
    NO_ACTION,
    Action,
    DeleteAhead,
    DeleteBehind,
    Direction,
    InsertChar,
    MoveCursor,
    NewLine,
    Quit,
    Save,
    SwitchMode,
)
from textrighter.keymaps import KeyCommand

from .base_mode import KeyInput, Mode

_COMMAND_ACTIONS: Mapping[KeyCommand, Action] = {
    KeyCommand.MOVE_LEFT: MoveCursor(Direction.LEFT),
    KeyCommand.MOVE_RIGHT: MoveCursor(Direction.RIGHT),
    KeyCommand.MOVE_UP: MoveCursor(Direction.UP),
    KeyCommand.MOVE_DOWN: MoveCursor(Direction.DOWN),
    KeyCommand.DELETE_BEHIND: DeleteBehind(),
    KeyCommand.DELETE_AHEAD: DeleteAhead(),
    KeyCommand.NEW_LINE: NewLine(),
    KeyCommand.EXIT_TO_NORMAL: SwitchMode("normal"),
    KeyCommand.SAVE: Save(),
    KeyCommand.QUIT: Quit(),
}


class InsertMode(Mode):
    name = "insert"

    def handle_key(self, key: KeyInput) -> Action:
        command = self.resolve_command(key)
        if command is not None and command in _COMMAND_ACTIONS:
            return _COMMAND_ACTIONS[command]

        char = key.printable
        if char is not None:
            return InsertChar(char)
        return NO_ACTION
