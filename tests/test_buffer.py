from __future__ import annotations

import pytest

from tte.buffer import Buffer, BufferValidationError


def test_new_buffer_is_empty_with_default_capacity() -> None:
    buffer = Buffer()

    assert buffer.used == 0
    assert buffer.size == 4096
    assert buffer.to_bytes() == b""


def test_from_bytes_grows_past_default_capacity() -> None:
    content = b"x" * 5000

    buffer = Buffer.from_bytes(content)

    assert buffer.used == 5000
    assert buffer.size >= 5000
    assert buffer.to_bytes() == content


def test_growth_doubles_and_keeps_used_within_size() -> None:
    buffer = Buffer(capacity=4)
    for index in range(9):
        buffer.insert(index, ord("a"))
        assert buffer.used <= buffer.size

    assert buffer.size == 16
    assert buffer.to_bytes() == b"a" * 9


def test_insert_in_middle_and_delete() -> None:
    buffer = Buffer.from_bytes(b"ace")

    buffer.insert(1, ord("b"))
    buffer.insert(3, ord("d"))
    assert buffer.to_bytes() == b"abcde"

    assert buffer.delete(0) == ord("a")
    assert buffer.delete(3) == ord("e")
    assert buffer.to_bytes() == b"bcd"


def test_version_tracks_mutations() -> None:
    buffer = Buffer.from_bytes(b"a")

    buffer.insert(1, ord("b"))
    buffer.delete(0)

    assert buffer.version == 2


def test_byte_at_is_bounded_by_used() -> None:
    buffer = Buffer.from_bytes(b"ab", capacity=8)

    assert buffer.byte_at(1) == ord("b")
    assert buffer.byte_at(2) is None
    assert buffer.byte_at(-1) is None


def test_out_of_range_edits_raise() -> None:
    buffer = Buffer.from_bytes(b"ab")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.insert(3, ord("x"))
    assert excinfo.value.offset == 3
    with pytest.raises(BufferValidationError):
        buffer.delete(2)
    with pytest.raises(BufferValidationError):
        buffer.insert(0, 256)


def test_line_helpers_ignore_slack_after_used() -> None:
    buffer = Buffer.from_bytes(b"ab\ncd", capacity=16)
    buffer.data[6] = ord("\n")

    assert buffer.line_count() == 2
    assert buffer.line_start(4) == 3
    assert buffer.line_end(4) == 5
    assert buffer.line_end(0) == 2
    assert buffer.line_index(5) == 1
