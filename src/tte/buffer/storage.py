"""Growable byte storage backing the editor buffer."""

from __future__ import annotations

from typing import Optional

from tte.runtime import telemetry
from tte.runtime.config import DEFAULT_CAPACITY

from .validation import ensure_byte, ensure_offset

NEWLINE = 0x0A


class Buffer:
    """Owned byte sequence with an explicit logical length.

    ``data`` is the whole allocation, ``size`` its capacity and ``used`` the
    number of meaningful bytes. Everything past ``used`` is slack that an
    insert may claim before the allocation has to grow.
    """

    def __init__(
        self, *, capacity: int = DEFAULT_CAPACITY, name: str = "default"
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.name = name
        self.data = bytearray(capacity)
        self.used = 0
        self.version = 0

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        *,
        capacity: int = DEFAULT_CAPACITY,
        name: str = "default",
    ) -> "Buffer":
        buffer = cls(capacity=max(capacity, len(content)), name=name)
        buffer.data[: len(content)] = content
        buffer.used = len(content)
        return buffer

    @property
    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return self.used

    def to_bytes(self) -> bytes:
        return bytes(self.data[: self.used])

    def byte_at(self, offset: int) -> Optional[int]:
        """Return the byte at ``offset`` or ``None`` past the logical end."""

        if 0 <= offset < self.used:
            return self.data[offset]
        return None

    def insert(self, offset: int, byte: int) -> None:
        ensure_offset(self, offset)
        ensure_byte(byte)
        if self.used == self.size:
            self.reserve(self.used + 1)
        self.data[offset + 1 : self.used + 1] = self.data[offset : self.used]
        self.data[offset] = byte
        self.used += 1
        self.version += 1

    def delete(self, offset: int) -> int:
        """Remove and return the byte at ``offset``."""

        ensure_offset(self, offset, allow_end=False)
        removed = self.data[offset]
        self.data[offset : self.used - 1] = self.data[offset + 1 : self.used]
        self.used -= 1
        self.data[self.used] = 0
        self.version += 1
        return removed

    def reserve(self, minimum: int) -> None:
        """Grow capacity (doubling) until it holds at least ``minimum`` bytes."""

        if minimum <= self.size:
            return
        capacity = self.size
        while capacity < minimum:
            capacity *= 2
        self.data.extend(bytes(capacity - self.size))
        telemetry.record_event(
            "buffer.grow",
            level="debug",
            data={"buffer": self.name, "size": capacity, "used": self.used},
        )

    def line_start(self, offset: int) -> int:
        """Offset of the first byte of the line containing ``offset``."""

        ensure_offset(self, offset)
        return self.data.rfind(NEWLINE, 0, offset) + 1

    def line_end(self, offset: int) -> int:
        """Offset of the newline ending the line at ``offset``, or ``used``."""

        ensure_offset(self, offset)
        end = self.data.find(NEWLINE, offset, self.used)
        return self.used if end == -1 else end

    def line_index(self, offset: int) -> int:
        ensure_offset(self, offset)
        return self.data.count(NEWLINE, 0, offset)

    def line_count(self) -> int:
        return self.data.count(NEWLINE, 0, self.used) + 1


__all__ = ["Buffer", "NEWLINE"]
