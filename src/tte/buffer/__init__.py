"""Byte buffer storage and cursor navigation."""

from tte.errors import BufferValidationError

from .cursor import CursorModel
from .state import CursorPosition
from .storage import NEWLINE, Buffer
from .validation import ensure_byte, ensure_offset

__all__ = [
    "Buffer",
    "BufferValidationError",
    "CursorModel",
    "CursorPosition",
    "NEWLINE",
    "ensure_byte",
    "ensure_offset",
]
