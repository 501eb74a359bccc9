"""Normal mode: repeat counts, pending commands and their resolution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Optional

from textrighter.actions import (
    NO_ACTION,
    Action,
    CommandPrompt,
    Delete,
    MoveCursor,
    OpenLine,
    Paste,
    Quit,
    SaveAndQuit,
    SwitchMode,
)
from textrighter.buffer.targets import EntireDocument, TextTarget
from textrighter.keymaps import KeymapResolver
from textrighter.runtime import telemetry

from . import pending
from .base_mode import KeyInput, Mode

Stage = Literal["idle", "awaiting_target"]


@dataclass(frozen=True, slots=True)
class NormalState:
    """Accumulator for a multi-keystroke normal-mode command.

    ``pending_command`` is only ever a two-stage command (``d`` or ``Z``)
    waiting for its second key. Every other command resolves in the step it
    is typed, so a target is never stored and cannot outlive its command.
    """

    repeat_count: Optional[int] = None
    pending_command: Optional[pending.PendingCommand] = None

    @property
    def stage(self) -> Stage:
        return "idle" if self.pending_command is None else "awaiting_target"

    @property
    def count(self) -> int:
        return self.repeat_count or 1

    @property
    def is_empty(self) -> bool:
        return self.repeat_count is None and self.pending_command is None


class NormalMode(Mode):
    name = "normal"

    def __init__(self, resolver: KeymapResolver) -> None:
        super().__init__(resolver)
        self.state = NormalState()

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.state = NormalState()

    def handle_key(self, key: KeyInput) -> Action:
        if self.state.pending_command is not None:
            return self._complete_target(key)

        digit = key.digit
        if digit is not None:
            return self._accumulate_count(digit)

        command = self.resolve_command(key)
        starter = pending.STARTERS.get(command) if command is not None else None
        if starter is None:
            return self._resolve(pending.Invalid(), None, key)
        return self._resolve(*starter, key)

    def _accumulate_count(self, digit: int) -> Action:
        # A leading 0 is a motion in vim, never the start of a count.
        if digit == 0 and self.state.repeat_count is None:
            return NO_ACTION
        count = (self.state.repeat_count or 0) * 10 + digit
        self.state = replace(self.state, repeat_count=count)
        return NO_ACTION

    def _complete_target(self, key: KeyInput) -> Action:
        command = self.state.pending_command
        assert command is not None
        key_command = self.resolve_command(key)
        targets = pending.TARGETS[type(command)]
        target = targets.get(key_command) if key_command is not None else None
        if target is None:
            return self._resolve(pending.Invalid(), None, key)
        return self._resolve(command, target, key)

    def _resolve(
        self,
        command: pending.PendingCommand,
        target: Optional[TextTarget],
        key: KeyInput,
    ) -> Action:
        if target is None and pending.needs_target(command):
            self.state = replace(self.state, pending_command=command)
            return NO_ACTION

        count = self.state.count
        self.state = NormalState()
        if isinstance(command, pending.Invalid):
            telemetry.record_event(
                "normal.invalid",
                level="debug",
                data={"key": key.stroke.token},
                logger_name="textrighter.modes.normal",
            )
        return _to_action(command, target, count)


def _to_action(
    command: pending.PendingCommand, target: Optional[TextTarget], count: int
) -> Action:
    if isinstance(command, pending.Move):
        return MoveCursor(command.direction, count)
    if isinstance(command, pending.EnterInsert):
        return SwitchMode("insert")
    if isinstance(command, pending.OpenLineAndInsert):
        return OpenLine(command.vertical)
    if isinstance(command, pending.OpenCommandLine):
        return CommandPrompt()
    if isinstance(command, pending.Paste):
        return Paste(command.direction, count)
    if isinstance(command, pending.Delete):
        assert target is not None
        return Delete(target, count)
    if isinstance(command, pending.Quit):
        return SaveAndQuit() if isinstance(target, EntireDocument) else Quit()
    return NO_ACTION


__all__ = ["NormalMode", "NormalState"]
