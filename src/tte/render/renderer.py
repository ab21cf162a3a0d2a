"""Screen output: highlighted buffer, status footer, cursor placement.

One byte of the buffer occupies one terminal cell. Tabs are shown as a
single space and other control or non-ASCII bytes as ``?`` so the column
the cursor model reports is always the column on screen. The last row is
reserved for the footer, unless the screen has a single row, in which case
the footer is dropped. The remaining rows form a viewport that scrolls
vertically to keep the cursor line visible. Rows are drawn from the home
position stepping down with next-line moves. Lines wider than the screen are
clipped, not wrapped.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Protocol, Sequence, Tuple

from tte.buffer import Buffer, CursorModel
from tte.runtime import telemetry
from tte.syntax import DEFAULT_STYLES, TokenKind, TokenSpan, Tokenizer, style_for
from tte.terminal import ansi
from tte.terminal.ansi import PLAIN, Style

Segment = Tuple[Style, bytes]

_CELL_MAP = bytes(
    b if 0x20 <= b <= 0x7E else (0x20 if b == 0x09 else 0x3F) for b in range(256)
)


class Screen(Protocol):
    """Output side of the terminal driver."""

    def write(self, data: bytes) -> None: ...

    def flush(self) -> None: ...

    def size(self) -> tuple[int, int]: ...


def to_cells(text: bytes) -> bytes:
    """Map each byte to the printable cell it is drawn as."""

    return text.translate(_CELL_MAP)


def render_spans(
    data: bytes,
    spans: Sequence[TokenSpan],
    styles: Mapping[TokenKind, Style] = DEFAULT_STYLES,
) -> bytes:
    """Return ``data`` with each span wrapped in its style's escapes."""

    return b"".join(
        ansi.styled(span.text(data), style_for(span.kind, styles)) for span in spans
    )


def split_lines(segments: Sequence[Segment]) -> List[List[Segment]]:
    """Break styled segments on newlines; an empty input is one empty line."""

    lines: List[List[Segment]] = [[]]
    for style, text in segments:
        pieces = text.split(b"\n")
        for index, piece in enumerate(pieces):
            if index:
                lines.append([])
            if piece:
                lines[-1].append((style, piece))
    return lines


def clip_line(line: Sequence[Segment], width: int) -> bytes:
    out = b""
    remaining = width
    for style, text in line:
        if remaining <= 0:
            break
        visible = to_cells(text[:remaining])
        out += ansi.styled(visible, style)
        remaining -= len(visible)
    return out


class Renderer:
    """Draws the editor state onto a ``Screen``.

    When ``highlight`` is off the tokenizer is bypassed and the buffer is
    drawn as plain text.
    """

    def __init__(
        self,
        screen: Screen,
        *,
        highlight: bool = True,
        tokenizer: Optional[Tokenizer] = None,
        styles: Mapping[TokenKind, Style] = DEFAULT_STYLES,
    ) -> None:
        self.screen = screen
        self.highlight = highlight
        self.tokenizer = tokenizer or Tokenizer()
        self.styles = styles
        self.top = 0
        self.rows, self.columns = screen.size()
        self.last_diagnostics = 0

    @property
    def has_footer(self) -> bool:
        return self.rows > 1

    @property
    def text_rows(self) -> int:
        return self.rows - 1 if self.has_footer else self.rows

    def refresh(
        self,
        buffer: Buffer,
        cursor: CursorModel,
        *,
        raw: bytes = b"",
        status: Optional[str] = None,
        full: bool = False,
    ) -> None:
        """Redraw what changed: the buffer only when edited or scrolled."""

        rows, columns = self.screen.size()
        resized = (rows, columns) != (self.rows, self.columns)
        self.rows, self.columns = rows, columns
        scrolled = self.scroll_to(cursor.line)
        if full or resized or scrolled:
            self.draw_buffer(buffer)
        self.draw_footer(cursor, raw=raw, status=status)
        self.place_cursor(cursor)
        self.screen.flush()

    def scroll_to(self, line: int) -> bool:
        top = self.top
        if line < top:
            top = line
        elif line >= top + self.text_rows:
            top = line - self.text_rows + 1
        changed = top != self.top
        self.top = top
        return changed

    def segments(self, buffer: Buffer) -> List[Segment]:
        data = buffer.to_bytes()
        if not self.highlight:
            return [(PLAIN, data)]
        result = self.tokenizer.scan(data)
        self.last_diagnostics = len(result.diagnostics)
        return [
            (style_for(span.kind, self.styles), span.text(data))
            for span in result.spans
        ]

    def draw_buffer(self, buffer: Buffer) -> None:
        with telemetry.span(
            "render::buffer",
            component="render",
            metadata={"top": self.top, "rows": self.rows, "highlight": self.highlight},
        ):
            lines = split_lines(self.segments(buffer))
            visible = lines[self.top : self.top + self.text_rows]
            out = ansi.RESET + ansi.CLEAR_SCREEN + ansi.HOME
            for index, line in enumerate(visible):
                if index:
                    out += ansi.next_line()
                out += clip_line(line, self.columns)
            self.screen.write(out)

    def footer_text(
        self, cursor: CursorModel, *, raw: bytes = b"", status: Optional[str] = None
    ) -> str:
        parts = [
            f"{self.rows}x{self.columns}",
            f"Ln {cursor.line + 1}, Col {cursor.column + 1}",
        ]
        if status:
            parts.append(status)
        if self.last_diagnostics:
            parts.append(f"{self.last_diagnostics} unclassified")
        if raw:
            parts.append("key " + " ".join(str(byte) for byte in raw))
        return " | ".join(parts)[: self.columns]

    def draw_footer(
        self, cursor: CursorModel, *, raw: bytes = b"", status: Optional[str] = None
    ) -> None:
        if not self.has_footer:
            return
        text = self.footer_text(cursor, raw=raw, status=status)
        self.screen.write(
            ansi.move_to(self.rows, 1)
            + ansi.CLEAR_LINE
            + to_cells(text.encode("ascii", "replace"))
        )

    def place_cursor(self, cursor: CursorModel) -> None:
        row = cursor.line - self.top + 1
        column = min(cursor.column, self.columns - 1) + 1
        self.screen.write(ansi.move_to(row, column))


__all__ = [
    "Renderer",
    "Screen",
    "clip_line",
    "render_spans",
    "split_lines",
    "to_cells",
]
