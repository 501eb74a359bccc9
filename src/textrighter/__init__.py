"""Modal terminal text editor: buffer, interpreter and Textual host."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "editor",
    "keymaps",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
