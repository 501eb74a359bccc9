"""Text buffer, cursor positions, delete targets and registers."""

from .document import TextBuffer
from .registers import RegisterBank, RegisterValue
from .state import Position
from .targets import (
    CharacterUnderCursor,
    EntireDocument,
    LineAfterCursor,
    Nothing,
    SpecificChar,
    TextTarget,
    WholeLine,
)
from .validation import BufferValidationError, ensure_column, ensure_line

__all__ = [
    "TextBuffer",
    "Position",
    "RegisterBank",
    "RegisterValue",
    "TextTarget",
    "Nothing",
    "EntireDocument",
    "WholeLine",
    "LineAfterCursor",
    "CharacterUnderCursor",
    "SpecificChar",
    "BufferValidationError",
    "ensure_line",
    "ensure_column",
]
