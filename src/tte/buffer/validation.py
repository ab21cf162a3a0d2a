"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tte.errors import BufferValidationError

if TYPE_CHECKING:
    from .storage import Buffer


def ensure_offset(buffer: "Buffer", offset: int, *, allow_end: bool = True) -> int:
    limit = buffer.used if allow_end else buffer.used - 1
    if offset < 0 or offset > limit:
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def ensure_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise BufferValidationError(f"Not a single byte: {value!r}")
    return value
