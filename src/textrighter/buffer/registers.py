"""Register storage for deleted (yanked) text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

RegisterType = Literal["character", "line"]
UNNAMED = '"'


@dataclass(frozen=True, slots=True)
class RegisterValue:
    text: str
    type: RegisterType = "character"

    @property
    def linewise(self) -> bool:
        return self.type == "line"


class RegisterBank:
    """Tracks the unnamed register plus any named ones a caller writes."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {UNNAMED: RegisterValue(text="")}

    def get(self, name: str = UNNAMED) -> RegisterValue:
        return self._registers.get(name, RegisterValue(text=""))

    def set(self, name: str, value: RegisterValue) -> None:
        self._registers[name] = value
        if name != UNNAMED:
            self._registers[UNNAMED] = value

    def append(self, name: str, text: str) -> None:
        existing = self.get(name)
        separator = "\n" if existing.linewise and existing.text else ""
        self.set(name, RegisterValue(existing.text + separator + text, existing.type))

    def yank_to(
        self, name: str, text: str, *, register_type: RegisterType = "character"
    ) -> None:
        self.set(name, RegisterValue(text=text, type=register_type))
