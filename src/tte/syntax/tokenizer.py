"""Single-pass lexical scan classifying a byte buffer into typed spans.

The grammar is a fixed, C-like approximation evaluated by first match at
each position. Nothing is ever rejected: a byte matching no rule becomes a
one-byte ``LITERAL`` span plus a diagnostic, so the spans of a scan always
partition the input exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Sequence, Union

from tte.runtime import telemetry

ByteSource = Union[bytes, bytearray, memoryview]

WHITESPACE_BYTES = frozenset(b" \n\r\t")
PUNCTUATION_BYTES = frozenset(b"(){}[]=,;*&")
LINE_BREAKS = frozenset(b"\n\r")
QUOTE = ord('"')
BACKSLASH = ord("\\")
SLASH = ord("/")
STAR = ord("*")


class TokenKind(str, Enum):
    WHITESPACE = "whitespace"
    BLOCK_COMMENT = "block_comment"
    LINE_COMMENT = "line_comment"
    STRING_LITERAL = "string_literal"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """Half-open byte range ``[start, start + length)`` of one kind."""

    kind: TokenKind
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def text(self, data: ByteSource) -> bytes:
        return bytes(data[self.start : self.end])


@dataclass(frozen=True, slots=True)
class ScanDiagnostic:
    """Recoverable anomaly: a byte no grammar rule accepts."""

    offset: int
    byte: int

    @property
    def message(self) -> str:
        return (
            f"unable to classify byte {self.byte} ({chr(self.byte)!r}) "
            f"at {self.offset}"
        )


@dataclass(slots=True)
class ScanResult:
    spans: List[TokenSpan] = field(default_factory=list)
    diagnostics: List[ScanDiagnostic] = field(default_factory=list)


def is_latin(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _skip_while(
    data: ByteSource, pos: int, end: int, accept: Callable[[int], bool]
) -> int:
    while pos < end and accept(data[pos]):
        pos += 1
    return pos


def _block_comment_end(data: ByteSource, pos: int, end: int) -> int:
    # pos sits just past the opening "/*"
    while pos < end:
        if data[pos] == STAR and pos + 1 < end and data[pos + 1] == SLASH:
            return pos + 2
        pos += 1
    return end


def _string_end(data: ByteSource, pos: int, end: int) -> int:
    # pos sits just past the opening quote, so data[pos - 1] always exists
    while pos < end:
        if data[pos] == QUOTE and data[pos - 1] != BACKSLASH:
            return pos + 1
        pos += 1
    return end


class Tokenizer:
    """Stateless scanner; every call rescans the whole input."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name

    def scan(self, data: ByteSource, used: int | None = None) -> ScanResult:
        """Classify ``data[0:used]`` (all of ``data`` when ``used`` is omitted)."""

        end = len(data) if used is None else used
        if not 0 <= end <= len(data):
            raise ValueError(f"used={end} outside 0..{len(data)}")
        with telemetry.span(
            "syntax::scan",
            logger_name=self._logger_name,
            component="syntax",
            metadata={"bytes": end},
        ) as handle:
            result = ScanResult()
            pos = 0
            while pos < end:
                kind, stop = self._match(data, pos, end)
                result.spans.append(TokenSpan(kind, pos, stop - pos))
                if kind is TokenKind.LITERAL:
                    result.diagnostics.append(ScanDiagnostic(pos, data[pos]))
                pos = stop
            handle.add_metadata("spans", len(result.spans))
            if result.diagnostics:
                handle.add_metadata("diagnostics", len(result.diagnostics))
                for diagnostic in result.diagnostics:
                    telemetry.record_event(
                        "syntax.unclassified",
                        level="debug",
                        data={"offset": diagnostic.offset, "byte": diagnostic.byte},
                        logger_name=self._logger_name,
                    )
        return result

    @staticmethod
    def _match(data: ByteSource, pos: int, end: int) -> tuple[TokenKind, int]:
        byte = data[pos]
        if byte in WHITESPACE_BYTES:
            return TokenKind.WHITESPACE, _skip_while(
                data, pos + 1, end, WHITESPACE_BYTES.__contains__
            )
        if byte == SLASH and pos + 1 < end:
            follower = data[pos + 1]
            if follower == STAR:
                return TokenKind.BLOCK_COMMENT, _block_comment_end(data, pos + 2, end)
            if follower == SLASH:
                return TokenKind.LINE_COMMENT, _skip_while(
                    data, pos + 2, end, lambda b: b not in LINE_BREAKS
                )
        if byte == QUOTE:
            return TokenKind.STRING_LITERAL, _string_end(data, pos + 1, end)
        if byte in PUNCTUATION_BYTES:
            return TokenKind.PUNCTUATION, pos + 1
        if is_latin(byte):
            return TokenKind.IDENTIFIER, _skip_while(data, pos + 1, end, is_latin)
        if is_digit(byte):
            return TokenKind.NUMBER, _skip_while(data, pos + 1, end, is_digit)
        return TokenKind.LITERAL, pos + 1


def tokenize(data: ByteSource, used: int | None = None) -> List[TokenSpan]:
    """Convenience wrapper returning only the spans of a scan."""

    return Tokenizer().scan(data, used).spans


def join_spans(data: ByteSource, spans: Sequence[TokenSpan]) -> bytes:
    return b"".join(span.text(data) for span in spans)


__all__ = [
    "ScanDiagnostic",
    "ScanResult",
    "TokenKind",
    "TokenSpan",
    "Tokenizer",
    "is_digit",
    "is_latin",
    "join_spans",
    "tokenize",
]
