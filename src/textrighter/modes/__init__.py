"""Modes, the normal-mode accumulator and the modal interpreter."""

from .base_mode import SPECIAL_KEYS, KeyInput, Mode
from .normal_mode import NormalMode, NormalState
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .interpreter import ModalInterpreter
from . import pending

__all__ = [
    "SPECIAL_KEYS",
    "KeyInput",
    "Mode",
    "NormalMode",
    "NormalState",
    "InsertMode",
    "CommandMode",
    "ModalInterpreter",
    "pending",
]
