"""Lexical scan and highlight styles."""

from .styles import DEFAULT_STYLES, style_for
from .tokenizer import (
    ScanDiagnostic,
    ScanResult,
    TokenKind,
    TokenSpan,
    Tokenizer,
    join_spans,
    tokenize,
)

__all__ = [
    "DEFAULT_STYLES",
    "ScanDiagnostic",
    "ScanResult",
    "TokenKind",
    "TokenSpan",
    "Tokenizer",
    "join_spans",
    "style_for",
    "tokenize",
]
