"""Fixed mapping from token kinds to display styles."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from tte.terminal.ansi import BLUE, BRIGHT_BLACK, PLAIN, YELLOW, Style

from .tokenizer import TokenKind

COMMENT = Style(fg=BRIGHT_BLACK)
STRING = Style(fg=YELLOW, bold=True)
IDENTIFIER = Style(fg=BLUE, bold=True)

DEFAULT_STYLES: Mapping[TokenKind, Style] = MappingProxyType(
    {
        TokenKind.BLOCK_COMMENT: COMMENT,
        TokenKind.LINE_COMMENT: COMMENT,
        TokenKind.STRING_LITERAL: STRING,
        TokenKind.IDENTIFIER: IDENTIFIER,
    }
)


def style_for(
    kind: TokenKind, styles: Mapping[TokenKind, Style] = DEFAULT_STYLES
) -> Style:
    return styles.get(kind, PLAIN)


__all__ = ["DEFAULT_STYLES", "style_for"]
