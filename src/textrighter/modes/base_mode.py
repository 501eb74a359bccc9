"""Key events and the base class shared by editor modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from textrighter.actions import Action
from textrighter.keymaps import KeyCommand, KeymapResolver, KeyStroke
from textrighter.keymaps.models import normalize_modifiers

KeyKind = Literal["press", "release"]

SPECIAL_KEYS = frozenset(
    {"UP", "DOWN", "LEFT", "RIGHT", "ENTER", "BACKSPACE", "DELETE", "ESC", "TAB"}
)
_DIGITS = "0123456789"
_COMMAND_MODIFIERS = frozenset({"ctrl", "alt"})


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is either one printable character or one of :data:`SPECIAL_KEYS`.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    kind: KeyKind = "press"

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        modifiers = normalize_modifiers(self.modifiers)
        if len(self.key) == 1:
            # Shift is already folded into the character itself ("O" vs "o").
            modifiers = tuple(m for m in modifiers if m != "shift")
        object.__setattr__(self, "modifiers", modifiers)

    @property
    def is_press(self) -> bool:
        return self.kind == "press"

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.key, self.modifiers)

    @property
    def printable(self) -> Optional[str]:
        if len(self.key) != 1 or _COMMAND_MODIFIERS.intersection(self.modifiers):
            return None
        return self.key

    @property
    def digit(self) -> Optional[int]:
        if self.modifiers or len(self.key) != 1 or self.key not in _DIGITS:
            return None
        return int(self.key)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, resolver: KeymapResolver) -> None:
        self.resolver = resolver

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> Action:  # pragma: no cover - abstract override
        raise NotImplementedError

    def resolve_command(self, key: KeyInput) -> Optional[KeyCommand]:
        return self.resolver.resolve(self.name, key.stroke).command
