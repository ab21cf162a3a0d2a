from __future__ import annotations

import pytest

from tte.buffer import Buffer, BufferValidationError, CursorModel, CursorPosition


def make_cursor(text: bytes, offset: int = 0) -> CursorModel:
    cursor = CursorModel(Buffer.from_bytes(text))
    cursor.move_to(offset)
    return cursor


def lines_of_lengths(*lengths: int) -> bytes:
    return b"\n".join(b"x" * length for length in lengths)


def test_move_to_derives_column_from_line_start() -> None:
    cursor = make_cursor(b"abc\ndef", offset=5)

    assert cursor.position == CursorPosition(5, 1)
    assert cursor.line == 1


def test_move_left_at_buffer_start_is_noop() -> None:
    cursor = make_cursor(b"abc")

    assert cursor.move_left() is False
    assert cursor.position == CursorPosition(0, 0)


def test_move_left_stops_at_line_start() -> None:
    cursor = make_cursor(b"ab\ncd", offset=3)

    assert cursor.move_left() is False
    assert cursor.offset == 3


def test_move_right_at_buffer_end_is_noop() -> None:
    cursor = make_cursor(b"abc", offset=3)

    assert cursor.move_right() is False
    assert cursor.position == CursorPosition(3, 3)


def test_move_right_does_not_wrap_past_newline() -> None:
    cursor = make_cursor(b"ab\ncd")

    assert cursor.move_right() is True
    assert cursor.move_right() is True
    assert cursor.move_right() is False
    assert cursor.position == CursorPosition(2, 2)


def test_vertical_motion_clamps_and_keeps_clamped_column() -> None:
    cursor = make_cursor(lines_of_lengths(5, 2, 8), offset=5)
    assert cursor.column == 5

    assert cursor.move_down() is True
    assert (cursor.line, cursor.column) == (1, 2)

    assert cursor.move_up() is True
    assert (cursor.line, cursor.column) == (0, 2)
    assert cursor.offset == 2


def test_move_down_onto_longer_line_keeps_column() -> None:
    cursor = make_cursor(lines_of_lengths(5, 2, 8), offset=7)

    assert cursor.move_down() is True
    assert cursor.position == CursorPosition(10, 1)


def test_move_up_on_first_line_is_noop() -> None:
    cursor = make_cursor(b"abc\ndef", offset=2)

    assert cursor.move_up() is False
    assert cursor.position == CursorPosition(2, 2)


def test_move_down_on_last_line_is_noop() -> None:
    cursor = make_cursor(b"abc\ndef", offset=5)

    assert cursor.move_down() is False
    assert cursor.position == CursorPosition(5, 1)


def test_vertical_motion_through_empty_lines() -> None:
    cursor = make_cursor(b"abc\n\n\nxyz", offset=3)

    assert cursor.move_down() is True
    assert cursor.position == CursorPosition(4, 0)
    assert cursor.move_down() is True
    assert cursor.move_down() is True
    assert cursor.position == CursorPosition(6, 0)
    assert cursor.move_down() is False


def test_move_down_onto_trailing_empty_line() -> None:
    cursor = make_cursor(b"abc\n", offset=2)

    assert cursor.move_down() is True
    assert cursor.position == CursorPosition(4, 0)


def test_empty_buffer_has_one_empty_line() -> None:
    cursor = CursorModel(Buffer())

    assert cursor.buffer.line_count() == 1
    for step in (
        cursor.move_left,
        cursor.move_right,
        cursor.move_up,
        cursor.move_down,
        cursor.delete_backward,
    ):
        assert step() is False
    assert cursor.position == CursorPosition(0, 0)


def test_insert_char_shifts_following_bytes() -> None:
    cursor = make_cursor(b"ac", offset=1)

    cursor.insert_char(ord("b"))

    assert cursor.buffer.to_bytes() == b"abc"
    assert cursor.position == CursorPosition(2, 2)


def test_insert_newline_resets_column() -> None:
    cursor = make_cursor(b"abcd", offset=2)

    cursor.insert_newline()

    assert cursor.buffer.to_bytes() == b"ab\ncd"
    assert cursor.position == CursorPosition(3, 0)
    assert cursor.line == 1


def test_delete_backward_over_newline_rescans_column() -> None:
    cursor = make_cursor(b"abc\nde", offset=4)

    assert cursor.delete_backward() is True

    assert cursor.buffer.to_bytes() == b"abcde"
    assert cursor.position == CursorPosition(3, 3)


def test_delete_backward_within_line() -> None:
    cursor = make_cursor(b"ab\ncd", offset=5)

    cursor.delete_backward()

    assert cursor.buffer.to_bytes() == b"ab\nc"
    assert cursor.position == CursorPosition(4, 1)


@pytest.mark.parametrize("text", [b"x", b"hello\nworld\n", b"\n\n\n", b"a\nbb\nccc"])
def test_repeated_delete_backward_empties_buffer(text: bytes) -> None:
    cursor = make_cursor(text, offset=len(text))

    for _ in range(len(text)):
        assert cursor.delete_backward() is True

    assert cursor.buffer.used == 0
    assert cursor.position == CursorPosition(0, 0)


def test_insert_grows_capacity_and_preserves_offset() -> None:
    cursor = CursorModel(Buffer(capacity=2))

    for byte in b"hello":
        cursor.insert_char(byte)

    assert cursor.buffer.to_bytes() == b"hello"
    assert cursor.buffer.size >= 5
    assert cursor.position == CursorPosition(5, 5)


def test_move_to_rejects_out_of_range_offsets() -> None:
    cursor = make_cursor(b"abc")

    with pytest.raises(BufferValidationError):
        cursor.move_to(4)
    with pytest.raises(BufferValidationError):
        cursor.move_to(-1)


def test_line_bounds_exclude_newline() -> None:
    cursor = make_cursor(b"ab\ncde\nf", offset=4)

    assert cursor.line_bounds() == (3, 6)
    assert cursor.line_bounds(7) == (7, 8)
