from __future__ import annotations

import string
from pathlib import Path

import pytest

from textrighter.buffer import (
    BufferValidationError,
    CharacterUnderCursor,
    EntireDocument,
    LineAfterCursor,
    Nothing,
    Position,
    SpecificChar,
    TextBuffer,
    WholeLine,
)


def make_buffer(*lines: str) -> TextBuffer:
    return TextBuffer(lines)


def test_insert_then_remove_behind_restores_line() -> None:
    start_text = "hello"
    for char in string.printable.strip():
        for column in range(len(start_text) + 1):
            buffer = make_buffer(start_text)
            buffer.insert(Position(column, 0), char)
            cursor = buffer.remove_behind(Position(column + 1, 0))

            assert buffer.line(0) == start_text
            assert buffer.line_length(cursor) == len(start_text)
            assert cursor == Position(column, 0)


def test_remove_behind_at_origin_is_noop() -> None:
    buffer = make_buffer("abc", "def")

    cursor = buffer.remove_behind(Position(0, 0))

    assert cursor == Position(0, 0)
    assert buffer.snapshot() == ("abc", "def")


def test_remove_behind_at_line_start_merges_lines() -> None:
    buffer = make_buffer("abc", "def")

    cursor = buffer.remove_behind(Position(0, 1))

    assert buffer.snapshot() == ("abcdef",)
    assert cursor == Position(3, 0)


def test_add_line_then_remove_behind_round_trip() -> None:
    for column in range(4):
        buffer = make_buffer("one", "abc", "three")

        buffer.add_line(Position(column, 1))
        assert buffer.line_count() == 4
        buffer.remove_behind(Position(0, 2))

        assert buffer.snapshot() == ("one", "abc", "three")


def test_add_line_past_end_is_noop() -> None:
    buffer = make_buffer("abc")

    buffer.add_line(Position(0, 1))

    assert buffer.snapshot() == ("abc",)


def test_insert_creates_missing_final_line() -> None:
    buffer = TextBuffer()

    buffer.insert(Position(0, 0), "a")

    assert buffer.snapshot() == ("a",)


def test_insert_rejects_out_of_range_column() -> None:
    buffer = make_buffer("ab")

    with pytest.raises(BufferValidationError) as info:
        buffer.insert(Position(5, 0), "x")

    assert info.value.position == Position(5, 0)


def test_insert_rejects_line_beyond_end() -> None:
    buffer = make_buffer("ab")

    with pytest.raises(BufferValidationError):
        buffer.insert(Position(0, 3), "x")


def test_insert_requires_single_character() -> None:
    with pytest.raises(ValueError):
        make_buffer("ab").insert(Position(0, 0), "xy")


def test_remove_ahead_returns_removed_character() -> None:
    buffer = make_buffer("abc")

    assert buffer.remove_ahead(Position(1, 0)) == "b"
    assert buffer.snapshot() == ("ac",)


def test_remove_ahead_at_line_end_joins_next_line() -> None:
    buffer = make_buffer("ab", "cd")

    assert buffer.remove_ahead(Position(2, 0)) is None
    assert buffer.snapshot() == ("abcd",)


def test_remove_ahead_at_document_end_is_noop() -> None:
    buffer = make_buffer("ab")

    assert buffer.remove_ahead(Position(2, 0)) is None
    assert buffer.snapshot() == ("ab",)


def test_remove_ahead_on_missing_line_raises() -> None:
    with pytest.raises(BufferValidationError):
        TextBuffer().remove_ahead(Position(0, 0))


def test_add_line_with_indent_inserts_spaces() -> None:
    buffer = make_buffer("a", "b")

    buffer.add_line_with_indent(Position(2, 1))
    buffer.add_line_with_indent(Position(0, 10))

    assert buffer.snapshot() == ("a", "  ", "b", "")


def test_delete_character_under_cursor() -> None:
    buffer = make_buffer("abc")

    removed = buffer.delete(Position(1, 0), CharacterUnderCursor())

    assert removed == "b"
    assert buffer.line(0) == "ac"


def test_delete_whole_line() -> None:
    buffer = make_buffer("a", "b", "c")

    assert buffer.delete(Position(0, 1), WholeLine()) == "b"
    assert buffer.snapshot() == ("a", "c")


def test_delete_line_after_cursor() -> None:
    buffer = make_buffer("hello world")

    assert buffer.delete(Position(5, 0), LineAfterCursor()) == " world"
    assert buffer.line(0) == "hello"


@pytest.mark.parametrize(
    "target", [Nothing(), EntireDocument(), SpecificChar("a")]
)
def test_delete_inert_targets_leave_text(target) -> None:
    buffer = make_buffer("abc")

    assert buffer.delete(Position(0, 0), target) == ""
    assert buffer.snapshot() == ("abc",)


def test_specific_char_requires_one_character() -> None:
    with pytest.raises(ValueError):
        SpecificChar("ab")


def test_render_clamps_huge_end() -> None:
    buffer = make_buffer("abcdef")

    for end in (6, 7, 10_000, 2**62):
        rendered = buffer.render(0, 0, end)
        assert rendered == "abcdef"
        assert len(rendered) <= buffer.line_length(Position(0, 0))

    assert buffer.render(0, 4, 10_000) == "ef"
    assert buffer.render(0, 50, 10_000) == ""


def test_line_out_of_range_raises() -> None:
    with pytest.raises(BufferValidationError):
        make_buffer("a").line(1)


def test_queries_on_empty_buffer() -> None:
    buffer = TextBuffer()

    assert buffer.is_empty()
    assert buffer.line_count() == 0
    assert buffer.line_length(Position(0, 3)) == 0


def test_negative_position_rejected() -> None:
    with pytest.raises(ValueError):
        Position(-1, 0)


def test_position_file_position_is_one_based() -> None:
    assert Position(0, 9).file_position() == " 1, 10"


def test_from_text_expands_tabs_and_strips_newlines() -> None:
    buffer = TextBuffer.from_text("a\tb\r\nsecond\n")

    assert buffer.snapshot() == ("a    b", "second")


def test_open_missing_file_gives_empty_buffer(tmp_path: Path) -> None:
    buffer = TextBuffer.open(tmp_path / "missing.txt")

    assert buffer.is_empty()


def test_open_undecodable_file_gives_empty_buffer(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    assert TextBuffer.open(path).is_empty()


def test_save_then_open_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("first\n\tindented\nlast", encoding="utf-8")

    buffer = TextBuffer.open(path)
    buffer.save(path)

    assert path.read_text(encoding="utf-8") == "first\n    indented\nlast\n"
    assert TextBuffer.open(path).snapshot() == buffer.snapshot()


def test_save_to_directory_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        make_buffer("a").save(tmp_path)
