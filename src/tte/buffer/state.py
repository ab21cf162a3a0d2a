"""Cursor position state tied to a buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Absolute ``offset`` plus its cached ``column`` within the line."""

    offset: int = 0
    column: int = 0

    def advanced(self, count: int = 1) -> "CursorPosition":
        return CursorPosition(self.offset + count, self.column + count)
