from __future__ import annotations

import pytest

from textrighter.actions import (
    NO_ACTION,
    DeleteAhead,
    DeleteBehind,
    Direction,
    InsertChar,
    InvalidCommand,
    MoveCursor,
    NewLine,
    Quit,
    Save,
    SaveAndQuit,
    SwitchMode,
    evaluate_command_text,
)
from textrighter.keymaps import Binding, KeyCommand, KeymapRegistry, KeyStroke
from textrighter.modes import KeyInput, ModalInterpreter


def insert_interpreter() -> ModalInterpreter:
    interpreter = ModalInterpreter()
    interpreter.switch_mode("insert")
    return interpreter


def test_printable_keys_insert_text() -> None:
    interpreter = insert_interpreter()

    assert interpreter.process_key(KeyInput("a")) == InsertChar("a")
    assert interpreter.process_key(KeyInput("h")) == InsertChar("h")
    assert interpreter.process_key(KeyInput(" ")) == InsertChar(" ")


def test_shifted_letter_inserts_capital() -> None:
    interpreter = insert_interpreter()

    action = interpreter.process_key(KeyInput("A", ("shift",)))

    assert action == InsertChar("A")


def test_insert_editing_keys() -> None:
    interpreter = insert_interpreter()

    assert interpreter.process_key(KeyInput("BACKSPACE")) == DeleteBehind(1)
    assert interpreter.process_key(KeyInput("DELETE")) == DeleteAhead(1)
    assert interpreter.process_key(KeyInput("ENTER")) == NewLine(1)
    assert interpreter.process_key(KeyInput("LEFT")) == MoveCursor(Direction.LEFT, 1)


def test_ctrl_shortcuts_in_insert_mode() -> None:
    interpreter = insert_interpreter()

    assert interpreter.process_key(KeyInput("s", ("ctrl",))) == Save()
    assert interpreter.process_key(KeyInput("q", ("ctrl",))) == Quit()
    assert interpreter.process_key(KeyInput("x", ("ctrl",))) == NO_ACTION
    assert interpreter.mode_name == "insert"


def test_unbound_special_key_is_ignored() -> None:
    interpreter = insert_interpreter()

    assert interpreter.process_key(KeyInput("TAB")) == NO_ACTION


def test_escape_returns_to_normal() -> None:
    interpreter = insert_interpreter()

    assert interpreter.process_key(KeyInput("ESC")) == SwitchMode("normal")
    assert interpreter.mode_name == "normal"


def test_command_mode_ignores_text_and_cancels_on_escape() -> None:
    interpreter = ModalInterpreter()
    interpreter.process_key(KeyInput(":"))

    assert interpreter.process_key(KeyInput("w")) == NO_ACTION
    assert interpreter.process_key(KeyInput("ESC")) == SwitchMode("normal")
    assert interpreter.mode_name == "normal"


def test_finish_command_returns_to_normal() -> None:
    interpreter = ModalInterpreter()
    interpreter.process_key(KeyInput(":"))

    assert interpreter.finish_command("wq") == SaveAndQuit()
    assert interpreter.mode_name == "normal"


def test_cancel_command() -> None:
    interpreter = ModalInterpreter()
    interpreter.process_key(KeyInput(":"))

    assert interpreter.cancel_command() == SwitchMode("normal")
    assert interpreter.mode_name == "normal"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("w", Save()),
        ("q", Quit()),
        ("wq", SaveAndQuit()),
        ("  wq ", SaveAndQuit()),
        ("", NO_ACTION),
        ("   ", NO_ACTION),
        ("x", InvalidCommand("x")),
        ("wqa", InvalidCommand("wqa")),
    ],
)
def test_evaluate_command_text(text: str, expected) -> None:
    assert evaluate_command_text(text) == expected


def test_switch_to_unknown_mode_raises() -> None:
    with pytest.raises(KeyError):
        ModalInterpreter().switch_mode("visual")


def test_injected_keymap_drives_normal_mode() -> None:
    registry = KeymapRegistry()
    registry.register_binding(
        Binding(
            id="normal.left_a",
            mode="normal",
            stroke=KeyStroke("a"),
            command=KeyCommand.MOVE_LEFT,
        )
    )
    interpreter = ModalInterpreter(keymap_registry=registry)

    assert interpreter.process_key(KeyInput("a")) == MoveCursor(Direction.LEFT, 1)
    assert interpreter.process_key(KeyInput("h")) == NO_ACTION
