"""Modal interpreter: owns the active mode and turns key events into actions."""

from __future__ import annotations

from typing import Dict, Optional

from textrighter.actions import (
    NO_ACTION,
    Action,
    CommandPrompt,
    ModeName,
    OpenLine,
    SwitchMode,
    evaluate_command_text,
)
from textrighter.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from textrighter.runtime import telemetry

from .base_mode import KeyInput, Mode
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode, NormalState

# Actions that imply a mode change once they have been emitted.
_IMPLIED_MODES: Dict[type, ModeName] = {
    OpenLine: "insert",
    CommandPrompt: "command",
}


class ModalInterpreter:
    """Processes one key event at a time, emitting at most one action.

    The keymap is injected; when none is given the fixed default bindings
    are loaded. The interpreter starts in normal mode with an empty
    accumulator and has no terminal state: quitting is an action for the
    caller to act on.
    """

    def __init__(
        self,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="textrighter.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="textrighter.keymaps"
        )
        self._modes: Dict[str, Mode] = {
            mode.name: mode
            for mode in (
                NormalMode(self.keymap_resolver),
                InsertMode(self.keymap_resolver),
                CommandMode(self.keymap_resolver),
            )
        }
        self._active: str = NormalMode.name
        self._modes[self._active].on_enter(None)

    @property
    def active_mode(self) -> Mode:
        return self._modes[self._active]

    @property
    def mode_name(self) -> str:
        return self._active

    @property
    def normal_state(self) -> Optional[NormalState]:
        """The normal-mode accumulator, or ``None`` outside normal mode."""

        mode = self.active_mode
        if isinstance(mode, NormalMode):
            return mode.state
        return None

    def process_key(self, key: KeyInput) -> Action:
        if not key.is_press:
            return NO_ACTION

        mode = self.active_mode
        with telemetry.span(
            f"mode::{mode.name}",
            component=True,
            metadata={"key": key.stroke.token, "mode": mode.name},
        ) as handle:
            action = mode.handle_key(key)
            handle.add_metadata("action", type(action).__name__)

        if isinstance(action, SwitchMode):
            self.switch_mode(action.mode)
        elif type(action) in _IMPLIED_MODES:
            self.switch_mode(_IMPLIED_MODES[type(action)])
        return action

    def finish_command(self, text: str) -> Action:
        """Resolve a completed command line and return to normal mode."""

        action = evaluate_command_text(text)
        self.switch_mode("normal")
        return action

    def cancel_command(self) -> Action:
        self.switch_mode("normal")
        return SwitchMode("normal")

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous.name == name:
            return
        previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name)
        telemetry.record_event(
            "mode.switch",
            data={"from": previous.name, "mode": name},
            logger_name="textrighter.modes",
        )


__all__ = ["ModalInterpreter"]
