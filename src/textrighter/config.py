"""Editor constants and per-mode display configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

TAB_WIDTH = 4
STATUS_MESSAGE_SECONDS = float(os.getenv("TEXTRIGHTER_STATUS_SECONDS", "5"))
WELCOME_MESSAGE = "Welcome to TextRighter"
UNNAMED_FILE_FORMAT = "unnamed_%Y%m%d%H%M.txt"


@dataclass(frozen=True)
class ModeConfig:
    """How a mode is presented in the status bar."""

    label: str
    color: str


MODE_CONFIGS = {
    "normal": ModeConfig("NORMAL", "#98C379"),
    "insert": ModeConfig("INSERT", "#E8B86D"),
    "command": ModeConfig(":", "#E06C75"),
}


def mode_config(name: str) -> ModeConfig:
    return MODE_CONFIGS.get(name, ModeConfig(name.upper(), "#ABB2BF"))


PROMPT_LABELS = {
    "command": ":",
    "save_as": "Save as: ",
}
