"""Textual host for the editor.

Importing this package does not pull in Textual itself; only
:mod:`textrighter.adapters.textual.app` does.
"""

from .controller import (
    TextualEditorAdapter,
    TextualUIHooks,
    Viewport,
    mark_indent,
    normalize_textual_key,
)

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "Viewport",
    "mark_indent",
    "normalize_textual_key",
]
