"""Built-in bindings for the normal, insert and command modes."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Binding, KeyCommand, KeyStroke
from .registry import KeymapRegistry


def _bind(
    binding_id: str, mode: str, token: str, command: KeyCommand, description: str
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(token),
        command=command,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("normal.move_left", "normal", "h", KeyCommand.MOVE_LEFT, "Cursor left"),
    _bind("normal.move_down", "normal", "j", KeyCommand.MOVE_DOWN, "Cursor down"),
    _bind("normal.move_up", "normal", "k", KeyCommand.MOVE_UP, "Cursor up"),
    _bind("normal.move_right", "normal", "l", KeyCommand.MOVE_RIGHT, "Cursor right"),
    _bind("normal.arrow_left", "normal", "LEFT", KeyCommand.MOVE_LEFT, "Cursor left"),
    _bind("normal.arrow_down", "normal", "DOWN", KeyCommand.MOVE_DOWN, "Cursor down"),
    _bind("normal.arrow_up", "normal", "UP", KeyCommand.MOVE_UP, "Cursor up"),
    _bind(
        "normal.arrow_right", "normal", "RIGHT", KeyCommand.MOVE_RIGHT, "Cursor right"
    ),
    _bind(
        "normal.enter_insert", "normal", "i", KeyCommand.ENTER_INSERT, "Insert mode"
    ),
    _bind(
        "normal.open_below",
        "normal",
        "o",
        KeyCommand.OPEN_LINE_BELOW,
        "Open a line below and insert",
    ),
    _bind(
        "normal.open_above",
        "normal",
        "O",
        KeyCommand.OPEN_LINE_ABOVE,
        "Open a line above and insert",
    ),
    _bind(
        "normal.delete_char",
        "normal",
        "x",
        KeyCommand.DELETE_CHAR,
        "Delete the character under the cursor",
    ),
    _bind(
        "normal.delete_to_end",
        "normal",
        "D",
        KeyCommand.DELETE_TO_LINE_END,
        "Delete to the end of the line",
    ),
    _bind("normal.delete", "normal", "d", KeyCommand.DELETE, "Delete (dd for a line)"),
    _bind(
        "normal.paste_after", "normal", "p", KeyCommand.PASTE_AFTER, "Paste after"
    ),
    _bind(
        "normal.paste_before", "normal", "P", KeyCommand.PASTE_BEFORE, "Paste before"
    ),
    _bind(
        "normal.command_line",
        "normal",
        ":",
        KeyCommand.COMMAND_LINE,
        "Enter command-line mode",
    ),
    _bind("normal.quit", "normal", "Z", KeyCommand.QUIT, "ZZ saves and quits"),
    _bind(
        "normal.quit_discard",
        "normal",
        "Q",
        KeyCommand.QUIT_DISCARD,
        "ZQ quits without saving",
    ),
    _bind("insert.arrow_left", "insert", "LEFT", KeyCommand.MOVE_LEFT, "Cursor left"),
    _bind("insert.arrow_down", "insert", "DOWN", KeyCommand.MOVE_DOWN, "Cursor down"),
    _bind("insert.arrow_up", "insert", "UP", KeyCommand.MOVE_UP, "Cursor up"),
    _bind(
        "insert.arrow_right", "insert", "RIGHT", KeyCommand.MOVE_RIGHT, "Cursor right"
    ),
    _bind(
        "insert.backspace",
        "insert",
        "BACKSPACE",
        KeyCommand.DELETE_BEHIND,
        "Delete behind the cursor",
    ),
    _bind(
        "insert.delete",
        "insert",
        "DELETE",
        KeyCommand.DELETE_AHEAD,
        "Delete ahead of the cursor",
    ),
    _bind("insert.enter", "insert", "ENTER", KeyCommand.NEW_LINE, "Split the line"),
    _bind(
        "insert.exit_escape", "insert", "ESC", KeyCommand.EXIT_TO_NORMAL, "Leave insert"
    ),
    _bind("insert.save", "insert", "ctrl+s", KeyCommand.SAVE, "Save the document"),
    _bind("insert.quit", "insert", "ctrl+q", KeyCommand.QUIT, "Quit the editor"),
    _bind(
        "command.exit_escape",
        "command",
        "ESC",
        KeyCommand.EXIT_TO_NORMAL,
        "Cancel the command line",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_BINDINGS"]
