from __future__ import annotations

from textrighter.buffer import RegisterBank, RegisterValue
from textrighter.buffer.registers import UNNAMED


def test_unnamed_register_starts_empty() -> None:
    bank = RegisterBank()

    assert bank.get() == RegisterValue(text="")
    assert bank.get("a").text == ""


def test_named_register_mirrors_to_unnamed() -> None:
    bank = RegisterBank()

    bank.yank_to("a", "line", register_type="line")

    assert bank.get("a").linewise
    assert bank.get(UNNAMED) == RegisterValue("line", "line")


def test_append_joins_linewise_text_with_newline() -> None:
    bank = RegisterBank()
    bank.yank_to("a", "one", register_type="line")

    bank.append("a", "two")

    assert bank.get("a").text == "one\ntwo"


def test_append_character_text_concatenates() -> None:
    bank = RegisterBank()
    bank.yank_to(UNNAMED, "ab")

    bank.append(UNNAMED, "cd")

    assert bank.get().text == "abcd"
    assert not bank.get().linewise
