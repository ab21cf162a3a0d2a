"""Raw-mode terminal session with guaranteed restoration.

``TerminalSession`` is a scoped acquisition: ``enter()`` switches the input
fd to raw mode and saves the screen, ``leave()`` puts both back. Use it as a
context manager so ``leave()`` runs on every exit path, including errors.
"""

from __future__ import annotations

import os
import shutil
import sys
import termios
from dataclasses import dataclass
from typing import Any, BinaryIO, List, Optional

from tte.errors import TerminalError
from tte.runtime import telemetry

from . import ansi

# tcgetattr list layout: [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]
_IFLAG = 0
_LFLAG = 3
_CC = 6

FALLBACK_SIZE = (80, 24)


@dataclass(slots=True)
class TerminalMode:
    """Token for an active raw-mode acquisition; holds the attributes to restore."""

    fd: int
    attributes: List[Any]
    active: bool = True


def raw_attributes(original: List[Any]) -> List[Any]:
    """Return a copy of ``original`` with line buffering, echo and flow control off."""

    attributes = list(original)
    attributes[_CC] = list(original[_CC])
    attributes[_LFLAG] &= ~(termios.ICANON | termios.ECHO)
    attributes[_IFLAG] &= ~(termios.IXON | termios.IXOFF)
    attributes[_CC][termios.VMIN] = 1
    attributes[_CC][termios.VTIME] = 0
    return attributes


class TerminalSession:
    """Owns the terminal for the lifetime of the editor."""

    def __init__(
        self,
        *,
        input_fd: Optional[int] = None,
        output: Optional[BinaryIO] = None,
        logger_name: str | None = None,
    ) -> None:
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output = output if output is not None else sys.stdout.buffer
        self.mode: Optional[TerminalMode] = None
        self._logger_name = logger_name

    @property
    def active(self) -> bool:
        return self.mode is not None and self.mode.active

    def __enter__(self) -> "TerminalSession":
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.leave()
        return False

    def enter(self) -> TerminalMode:
        if self.active:
            raise TerminalError("Terminal session already active", fd=self.input_fd)
        try:
            original = termios.tcgetattr(self.input_fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(
                f"Unable to query terminal attributes: {exc}", fd=self.input_fd
            ) from exc

        mode = TerminalMode(fd=self.input_fd, attributes=original)
        self.mode = mode
        # once raw mode is set, any failure before returning must restore it
        try:
            termios.tcsetattr(self.input_fd, termios.TCSANOW, raw_attributes(original))
            self.write(ansi.SAVE_SCREEN)
            self.flush()
            telemetry.record_event(
                "terminal.enter",
                data={"fd": self.input_fd},
                logger_name=self._logger_name,
            )
        except (termios.error, OSError) as exc:
            self._leave_best_effort(mode)
            raise TerminalError(
                f"Unable to enter raw mode: {exc}", fd=self.input_fd
            ) from exc
        except BaseException:
            self._leave_best_effort(mode)
            raise
        return mode

    def leave(self, mode: Optional[TerminalMode] = None) -> None:
        """Restore attributes and screen; a no-op once ``mode`` is released."""

        target = mode if mode is not None else self.mode
        if target is None or not target.active:
            return
        target.active = False

        failure: Optional[BaseException] = None
        try:
            termios.tcsetattr(target.fd, termios.TCSANOW, target.attributes)
        except (termios.error, OSError) as exc:
            failure = exc
        try:
            self.write(ansi.RESET + ansi.RESTORE_SCREEN)
            self.flush()
        except TerminalError as exc:
            failure = failure or exc

        telemetry.record_event(
            "terminal.leave",
            data={"fd": target.fd, "clean": failure is None},
            logger_name=self._logger_name,
        )
        if failure is not None:
            raise TerminalError(
                f"Unable to restore terminal: {failure}", fd=target.fd
            ) from failure

    def _leave_best_effort(self, mode: TerminalMode) -> None:
        try:
            self.leave(mode)
        except TerminalError as exc:
            telemetry.record_event(
                "terminal.leave_failed",
                level="error",
                data={"reason": str(exc)},
                logger_name=self._logger_name,
            )

    def read(self, size: int) -> bytes:
        try:
            return os.read(self.input_fd, size)
        except OSError as exc:
            raise TerminalError(f"Read failed: {exc}", fd=self.input_fd) from exc

    def write(self, data: bytes) -> None:
        try:
            self.output.write(data)
        except OSError as exc:
            raise TerminalError(f"Write failed: {exc}") from exc

    def flush(self) -> None:
        try:
            self.output.flush()
        except OSError as exc:
            raise TerminalError(f"Flush failed: {exc}") from exc

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` as reported by the terminal driver."""

        columns, rows = shutil.get_terminal_size(fallback=FALLBACK_SIZE)
        return max(1, rows), max(1, columns)


__all__ = ["TerminalMode", "TerminalSession", "raw_attributes"]
