"""Shared state handed to every action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from tte.buffer import Buffer, CursorModel


@dataclass(slots=True)
class ActionResult:
    """Outcome of running one action against the editor state."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    edited: bool = False
    moved: bool = False
    quit: bool = False


class EditorBus:
    """Minimal event bus letting actions publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Buffer, cursor, and bus owned by the running editor."""

    buffer: Buffer
    cursor: CursorModel
    bus: EditorBus = field(default_factory=EditorBus)

    @classmethod
    def for_buffer(cls, buffer: Buffer) -> "EditorContext":
        return cls(buffer=buffer, cursor=CursorModel(buffer))
