"""Command-line mode.

The typed command text belongs to the host's prompt; this mode only knows
how to be cancelled. Completed lines go through
:func:`textrighter.actions.evaluate_command_text`.
"""

from __future__ import annotations

from textrighter.actions import NO_ACTION, Action, SwitchMode
from textrighter.keymaps import KeyCommand

from .base_mode import KeyInput, Mode


class CommandMode(Mode):
    name = "command"

    def handle_key(self, key: KeyInput) -> Action:
        if self.resolve_command(key) is KeyCommand.EXIT_TO_NORMAL:
            return SwitchMode("normal")
        return NO_ACTION
