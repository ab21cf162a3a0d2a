"""Terminal driver boundary: escapes, raw-mode session, environment checks."""

from . import ansi
from .capabilities import require_supported_term
from .session import TerminalMode, TerminalSession, raw_attributes

__all__ = [
    "ansi",
    "TerminalMode",
    "TerminalSession",
    "raw_attributes",
    "require_supported_term",
]
