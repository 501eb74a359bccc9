"""Resolution of completed ``:`` command lines."""

from __future__ import annotations

from typing import Callable, Dict

from .core import NO_ACTION, Action, InvalidCommand, Quit, Save, SaveAndQuit

_COMMANDS: Dict[str, Callable[[], Action]] = {
    "w": Save,
    "q": Quit,
    "wq": SaveAndQuit,
}


def evaluate_command_text(text: str) -> Action:
    command = text.strip()
    if not command:
        return NO_ACTION
    factory = _COMMANDS.get(command)
    if factory is None:
        return InvalidCommand(text=command)
    return factory()


__all__ = ["evaluate_command_text"]
