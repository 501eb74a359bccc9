from __future__ import annotations

from textrighter.actions import (
    NO_ACTION,
    CommandPrompt,
    Delete,
    Direction,
    MoveCursor,
    OpenLine,
    Paste,
    Quit,
    SaveAndQuit,
    SwitchMode,
    Vertical,
)
from textrighter.buffer import CharacterUnderCursor, LineAfterCursor, WholeLine
from textrighter.modes import KeyInput, ModalInterpreter, NormalState, pending


def press(interpreter: ModalInterpreter, *keys: str):
    return [interpreter.process_key(KeyInput(key)) for key in keys]


def test_count_then_dd_yields_counted_line_delete() -> None:
    interpreter = ModalInterpreter()

    first, second, third = press(interpreter, "3", "d", "d")

    assert first == NO_ACTION
    assert second == NO_ACTION
    assert third == Delete(WholeLine(), 3)
    assert interpreter.normal_state == NormalState()


def test_state_is_retained_between_incomplete_keys() -> None:
    interpreter = ModalInterpreter()

    press(interpreter, "3")
    assert interpreter.normal_state == NormalState(repeat_count=3)

    press(interpreter, "d")
    state = interpreter.normal_state
    assert state is not None
    assert state.repeat_count == 3
    assert state.pending_command == pending.Delete()
    assert state.stage == "awaiting_target"


def test_x_and_d_capital_resolve_in_one_key() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "x") == [Delete(CharacterUnderCursor(), 1)]
    assert press(interpreter, "D") == [Delete(LineAfterCursor(), 1)]


def test_zz_saves_and_quits() -> None:
    interpreter = ModalInterpreter()

    first, second = press(interpreter, "Z", "Z")

    assert first == NO_ACTION
    assert second == SaveAndQuit()


def test_pending_quit_has_no_target() -> None:
    interpreter = ModalInterpreter()

    press(interpreter, "Z")

    state = interpreter.normal_state
    assert state is not None
    assert state.pending_command == pending.Quit()
    assert state.repeat_count is None


def test_zq_quits_without_saving() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "Z", "Q") == [NO_ACTION, Quit()]


def test_leading_zero_is_ignored() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "0") == [NO_ACTION]
    assert interpreter.normal_state == NormalState()


def test_multi_digit_count() -> None:
    interpreter = ModalInterpreter()

    actions = press(interpreter, "1", "0", "j")

    assert actions[-1] == MoveCursor(Direction.DOWN, 10)


def test_d_followed_by_other_key_is_invalid() -> None:
    interpreter = ModalInterpreter()

    actions = press(interpreter, "2", "d", "j")

    assert actions == [NO_ACTION, NO_ACTION, NO_ACTION]
    assert interpreter.normal_state == NormalState()


def test_digit_while_awaiting_target_is_invalid() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "d", "2", "d") == [NO_ACTION, NO_ACTION, NO_ACTION]
    assert interpreter.normal_state == NormalState(pending_command=pending.Delete())


def test_unknown_key_clears_count() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "5", "q") == [NO_ACTION, NO_ACTION]
    assert interpreter.normal_state == NormalState()


def test_motions_and_arrows() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "h", "l", "k", "UP") == [
        MoveCursor(Direction.LEFT, 1),
        MoveCursor(Direction.RIGHT, 1),
        MoveCursor(Direction.UP, 1),
        MoveCursor(Direction.UP, 1),
    ]


def test_paste_carries_count() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "2", "p") == [NO_ACTION, Paste(Direction.RIGHT, 2)]
    assert press(interpreter, "P") == [Paste(Direction.LEFT, 1)]


def test_insert_entry_switches_mode() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "i") == [SwitchMode("insert")]
    assert interpreter.mode_name == "insert"
    assert interpreter.normal_state is None


def test_open_line_switches_to_insert() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, "O") == [OpenLine(Vertical.UP)]
    assert interpreter.mode_name == "insert"


def test_colon_opens_command_mode() -> None:
    interpreter = ModalInterpreter()

    assert press(interpreter, ":") == [CommandPrompt()]
    assert interpreter.mode_name == "command"


def test_release_events_leave_state_alone() -> None:
    interpreter = ModalInterpreter()
    press(interpreter, "3", "d")
    before = interpreter.normal_state

    action = interpreter.process_key(KeyInput("d", kind="release"))

    assert action == NO_ACTION
    assert interpreter.normal_state == before


def test_reentering_normal_mode_resets_state() -> None:
    interpreter = ModalInterpreter()
    press(interpreter, "4")

    interpreter.switch_mode("insert")
    interpreter.switch_mode("normal")

    assert interpreter.normal_state == NormalState()


def test_normal_state_defaults() -> None:
    state = NormalState()

    assert state.is_empty
    assert state.count == 1
    assert state.stage == "idle"
