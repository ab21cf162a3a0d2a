"""ANSI/VT100 escape primitives.

Everything here returns ``bytes`` ready to be written to the terminal; no
function performs I/O itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ESC = b"\x1b"
CSI = b"\x1b["

SAVE_SCREEN = b"\x1b[?47h"
RESTORE_SCREEN = b"\x1b[?47l"
CLEAR_SCREEN = b"\x1b[2J"
CLEAR_LINE = b"\x1b[2K"
HOME = b"\x1b[H"
RESET = b"\x1b[m"


# Standard palette indices (SGR 30-37, bright 90-97)
BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)
BRIGHT_BLACK = 8


@dataclass(frozen=True, slots=True)
class Style:
    """Text attributes: optional palette foreground, bold, dim."""

    fg: Optional[int] = None
    bold: bool = False
    dim: bool = False

    @property
    def is_plain(self) -> bool:
        return self.fg is None and not self.bold and not self.dim

    def sgr(self) -> bytes:
        """Return the SGR escape enabling this style (empty for plain text)."""

        parts: list[str] = []
        if self.bold:
            parts.append("1")
        if self.dim:
            parts.append("2")
        if self.fg is not None:
            parts.append(str(30 + self.fg) if self.fg < 8 else str(90 + self.fg - 8))
        if not parts:
            return b""
        return CSI + ";".join(parts).encode("ascii") + b"m"


PLAIN = Style()


def move_to(row: int, column: int) -> bytes:
    """Absolute move; ``row`` and ``column`` are 1-based."""

    return CSI + f"{max(1, row)};{max(1, column)}H".encode("ascii")


def move_by(rows: int = 0, columns: int = 0) -> bytes:
    """Relative move; positive values go down/right."""

    out = b""
    if rows:
        out += CSI + f"{abs(rows)}{'B' if rows > 0 else 'A'}".encode("ascii")
    if columns:
        out += CSI + f"{abs(columns)}{'C' if columns > 0 else 'D'}".encode("ascii")
    return out


def next_line(count: int = 1) -> bytes:
    return CSI + f"{count}E".encode("ascii")


def previous_line(count: int = 1) -> bytes:
    return CSI + f"{count}F".encode("ascii")


def styled(text: bytes, style: Style) -> bytes:
    if style.is_plain or not text:
        return text
    return style.sgr() + text + RESET


__all__ = [
    "CLEAR_LINE",
    "CLEAR_SCREEN",
    "HOME",
    "PLAIN",
    "RESET",
    "RESTORE_SCREEN",
    "SAVE_SCREEN",
    "Style",
    "move_by",
    "move_to",
    "next_line",
    "previous_line",
    "styled",
]
