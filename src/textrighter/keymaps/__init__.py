"""Injected keymap: raw key strokes to abstract key commands."""

from .models import Binding, KeyCommand, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionResult
from .defaults import DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "Binding",
    "KeyCommand",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
