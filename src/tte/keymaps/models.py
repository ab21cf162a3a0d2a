"""Dataclasses describing key events, bindings, and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional


class KeyKind(str, Enum):
    """Closed set of logical keys the decoder can produce."""

    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    QUIT = "quit"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Single decoded key press together with the raw bytes it came from."""

    kind: KeyKind
    raw: bytes = b""
    byte: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR and self.byte is None:
            raise ValueError("CHAR events require a byte")
        if self.kind is not KeyKind.CHAR and self.byte is not None:
            raise ValueError(f"{self.kind.value} events carry no byte")

    @classmethod
    def char(cls, byte: int) -> "KeyEvent":
        return cls(KeyKind.CHAR, raw=bytes((byte,)), byte=byte)

    @classmethod
    def unrecognized(cls, raw: bytes) -> "KeyEvent":
        return cls(KeyKind.UNRECOGNIZED, raw=bytes(raw))

    @property
    def token(self) -> str:
        if self.kind is KeyKind.CHAR:
            return chr(self.byte or 0)
        return f"<{self.kind.value}>"


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key kind with an action."""

    id: str
    kind: KeyKind
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "kind", KeyKind(self.kind))


__all__ = [
    "KeyKind",
    "KeyEvent",
    "ActionRef",
    "Binding",
]
