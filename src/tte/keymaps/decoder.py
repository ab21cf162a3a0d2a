"""Decode raw terminal reads into logical key events.

Only one escape family is understood: the 3-byte CSI arrow sequences
(``ESC [ A`` .. ``ESC [ D``). Every other multi-byte read, and every single
byte outside the handled set, becomes an ``UNRECOGNIZED`` event so the caller
can report it and carry on.
"""

from __future__ import annotations

from typing import List

from tte.runtime import telemetry

from .models import KeyEvent, KeyKind

ESC = 0x1B
CTRL_Q = 0x11
DEL = 0x7F
NEWLINE = 0x0A
CSI_PREFIX = b"\x1b["

ARROWS = {
    ord("A"): KeyKind.ARROW_UP,
    ord("B"): KeyKind.ARROW_DOWN,
    ord("C"): KeyKind.ARROW_RIGHT,
    ord("D"): KeyKind.ARROW_LEFT,
}

SINGLE_BYTE_KEYS = {
    NEWLINE: KeyKind.ENTER,
    DEL: KeyKind.BACKSPACE,
    ESC: KeyKind.QUIT,
    CTRL_Q: KeyKind.QUIT,
}


def is_printable(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


class InputDecoder:
    """Stateless translator from one read chunk to key events."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name

    def decode(self, chunk: bytes) -> List[KeyEvent]:
        """Return the events in ``chunk``; an empty chunk means end of input."""

        if not chunk:
            return []
        event = self._decode_one(bytes(chunk))
        if event.kind is KeyKind.UNRECOGNIZED:
            telemetry.record_event(
                "input.unrecognized",
                level="warning",
                data={"raw": event.raw, "length": len(event.raw)},
                logger_name=self._logger_name,
            )
        return [event]

    def _decode_one(self, chunk: bytes) -> KeyEvent:
        if len(chunk) == 1:
            byte = chunk[0]
            if is_printable(byte):
                return KeyEvent.char(byte)
            kind = SINGLE_BYTE_KEYS.get(byte)
            if kind is not None:
                return KeyEvent(kind, raw=chunk)
        elif len(chunk) == 3 and chunk.startswith(CSI_PREFIX):
            kind = ARROWS.get(chunk[2])
            if kind is not None:
                return KeyEvent(kind, raw=chunk)
        return KeyEvent.unrecognized(chunk)


__all__ = ["InputDecoder", "is_printable"]
