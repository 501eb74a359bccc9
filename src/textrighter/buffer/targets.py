"""Targets that delete-class commands act on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Nothing:
    pass


@dataclass(frozen=True, slots=True)
class EntireDocument:
    pass


@dataclass(frozen=True, slots=True)
class WholeLine:
    pass


@dataclass(frozen=True, slots=True)
class LineAfterCursor:
    pass


@dataclass(frozen=True, slots=True)
class CharacterUnderCursor:
    pass


@dataclass(frozen=True, slots=True)
class SpecificChar:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("SpecificChar expects exactly one character")


TextTarget = Union[
    Nothing,
    EntireDocument,
    WholeLine,
    LineAfterCursor,
    CharacterUnderCursor,
    SpecificChar,
]

__all__ = [
    "TextTarget",
    "Nothing",
    "EntireDocument",
    "WholeLine",
    "LineAfterCursor",
    "CharacterUnderCursor",
    "SpecificChar",
]
