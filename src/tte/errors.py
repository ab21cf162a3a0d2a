"""Exception hierarchy shared by the editor components."""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for every error the editor raises on purpose."""


class UnsupportedTerminalError(EditorError):
    """Raised when ``TERM`` names a terminal the editor cannot drive."""

    def __init__(self, message: str, *, term: Optional[str] = None) -> None:
        super().__init__(message)
        self.term = term


class TerminalError(EditorError):
    """Raised when querying or applying terminal state, or terminal I/O, fails.

    These failures are fatal: the terminal may be in an indeterminate state
    and nothing is retried.
    """

    def __init__(self, message: str, *, fd: Optional[int] = None) -> None:
        super().__init__(message)
        self.fd = fd


class BufferValidationError(EditorError):
    """Raised when an offset or byte value falls outside the buffer's bounds."""

    def __init__(self, message: str, *, offset: Optional[int] = None) -> None:
        super().__init__(message)
        self.offset = offset


__all__ = [
    "EditorError",
    "UnsupportedTerminalError",
    "TerminalError",
    "BufferValidationError",
]
