from __future__ import annotations

import pytest

from tte.keymaps import InputDecoder, KeyEvent, KeyKind


def decode_one(chunk: bytes) -> KeyEvent:
    events = InputDecoder().decode(chunk)
    assert len(events) == 1
    return events[0]


def test_every_printable_byte_decodes_to_char() -> None:
    decoder = InputDecoder()
    for byte in range(0x20, 0x7F):
        (event,) = decoder.decode(bytes((byte,)))
        assert event == KeyEvent.char(byte)
        assert event.byte == byte


@pytest.mark.parametrize(
    ("chunk", "kind"),
    [
        (b"\x1b[A", KeyKind.ARROW_UP),
        (b"\x1b[B", KeyKind.ARROW_DOWN),
        (b"\x1b[C", KeyKind.ARROW_RIGHT),
        (b"\x1b[D", KeyKind.ARROW_LEFT),
    ],
)
def test_csi_arrow_sequences(chunk: bytes, kind: KeyKind) -> None:
    event = decode_one(chunk)

    assert event.kind is kind
    assert event.raw == chunk


@pytest.mark.parametrize(
    ("chunk", "kind"),
    [
        (b"\n", KeyKind.ENTER),
        (b"\x7f", KeyKind.BACKSPACE),
        (b"\x1b", KeyKind.QUIT),
        (b"\x11", KeyKind.QUIT),
    ],
)
def test_single_control_bytes(chunk: bytes, kind: KeyKind) -> None:
    assert decode_one(chunk).kind is kind


@pytest.mark.parametrize(
    "chunk",
    [
        b"\x01",
        b"\t",
        b"\r",
        b"\x80",
        b"\x1b[E",
        b"\x1b[5~",
        b"\x1bOA",
        b"ab",
        b"\x1b[",
    ],
)
def test_anything_else_is_unrecognized(chunk: bytes) -> None:
    event = decode_one(chunk)

    assert event.kind is KeyKind.UNRECOGNIZED
    assert event.raw == chunk
    assert event.byte is None


def test_empty_read_yields_no_events() -> None:
    assert InputDecoder().decode(b"") == []


def test_char_events_require_a_byte() -> None:
    with pytest.raises(ValueError):
        KeyEvent(KeyKind.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(KeyKind.ENTER, byte=0x0A)
