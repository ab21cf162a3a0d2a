"""Cursor navigation and editing over a flat byte buffer.

The buffer keeps no line index, so every vertical motion rediscovers line
boundaries by scanning for newlines. Scans are bounded by ``buffer.used``.
"""

from __future__ import annotations

from typing import Optional

from .state import CursorPosition
from .storage import NEWLINE, Buffer
from .validation import ensure_offset


class CursorModel:
    """Tracks a (line, column) position over the 1D buffer.

    Every operation returns ``True`` when it changed the position or the
    buffer and ``False`` when it was a no-op.
    """

    def __init__(
        self, buffer: Buffer, position: Optional[CursorPosition] = None
    ) -> None:
        self.buffer = buffer
        self.position = CursorPosition()
        if position is not None:
            self.move_to(position.offset)

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def line(self) -> int:
        return self.buffer.line_index(self.offset)

    def line_bounds(self, offset: Optional[int] = None) -> tuple[int, int]:
        """Return ``(start, end)`` of the line holding ``offset``.

        ``end`` excludes the newline.
        """

        at = self.offset if offset is None else offset
        return self.buffer.line_start(at), self.buffer.line_end(at)

    def move_to(self, offset: int) -> None:
        ensure_offset(self.buffer, offset)
        self.position = CursorPosition(offset, offset - self.buffer.line_start(offset))

    def move_left(self) -> bool:
        if self.column == 0:
            return False
        self.position = self.position.advanced(-1)
        return True

    def move_right(self) -> bool:
        byte = self.buffer.byte_at(self.offset)
        if byte is None or byte == NEWLINE:
            return False
        self.position = self.position.advanced(1)
        return True

    def move_up(self) -> bool:
        start = self.offset - self.column
        if start == 0:
            return False
        previous_end = start - 1
        previous_start = self.buffer.line_start(previous_end)
        column = min(self.column, previous_end - previous_start)
        self.position = CursorPosition(previous_start + column, column)
        return True

    def move_down(self) -> bool:
        end = self.buffer.line_end(self.offset)
        if end == self.buffer.used:
            return False
        next_start = end + 1
        next_end = self.buffer.line_end(next_start)
        column = min(self.column, next_end - next_start)
        self.position = CursorPosition(next_start + column, column)
        return True

    def insert_char(self, byte: int) -> bool:
        self.buffer.insert(self.offset, byte)
        self.position = self.position.advanced(1)
        return True

    def insert_newline(self) -> bool:
        self.buffer.insert(self.offset, NEWLINE)
        self.position = CursorPosition(self.offset + 1, 0)
        return True

    def delete_backward(self) -> bool:
        if self.offset == 0:
            return False
        offset = self.offset - 1
        removed = self.buffer.delete(offset)
        if removed == NEWLINE:
            column = offset - self.buffer.line_start(offset)
            self.position = CursorPosition(offset, column)
        else:
            self.position = CursorPosition(offset, self.column - 1)
        return True


__all__ = ["CursorModel"]
