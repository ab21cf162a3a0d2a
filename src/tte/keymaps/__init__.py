"""Key decoding, bindings, and the default keymap."""

from .models import ActionRef, Binding, KeyEvent, KeyKind
from .decoder import InputDecoder
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyEvent",
    "KeyKind",
    "InputDecoder",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
    "load_default_keymaps",
]
