"""The single-threaded read, decode, mutate, render loop."""

from __future__ import annotations

from functools import partial
from typing import List, Mapping, Optional, Protocol

from tte.keymaps import InputDecoder
from tte.render import Renderer, Screen
from tte.runtime import telemetry
from tte.runtime.config import EditorConfig

from .context import ActionResult, EditorContext
from .dispatcher import KeyDispatcher


# bus signals mirrored into telemetry
RECORDED_SIGNALS = (
    "buffer.insert",
    "buffer.delete",
    "editor.quit",
    "input.unrecognized",
)


class Terminal(Screen, Protocol):
    """Screen that can also block for input."""

    def read(self, size: int) -> bytes: ...


class Editor:
    """Runs until a quit key or end of input.

    ``running`` is the cooperative cancellation flag: a quit action clears it
    and the loop observes it before the next read.
    """

    def __init__(
        self,
        context: EditorContext,
        terminal: Terminal,
        *,
        config: Optional[EditorConfig] = None,
        decoder: Optional[InputDecoder] = None,
        dispatcher: Optional[KeyDispatcher] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.context = context
        self.terminal = terminal
        self.config = config or EditorConfig()
        self.decoder = decoder or InputDecoder(logger_name="tte.input")
        self.dispatcher = dispatcher or KeyDispatcher(context)
        self.renderer = renderer or Renderer(terminal, highlight=self.config.highlight)
        self.running = False
        for signal in RECORDED_SIGNALS:
            context.bus.subscribe(signal, partial(self._record_signal, signal))

    def run(self) -> int:
        self.running = True
        self.renderer.refresh(self.context.buffer, self.context.cursor, full=True)
        while self.running:
            chunk = self.terminal.read(self.config.read_size)
            if not chunk:
                telemetry.record_event("input.eof")
                break
            self.feed(chunk)
        telemetry.record_event(
            "editor.exit",
            data={
                "used": self.context.buffer.used,
                "offset": self.context.cursor.offset,
            },
        )
        return 0

    def _record_signal(self, signal: str, payload: object) -> None:
        data = dict(payload) if isinstance(payload, Mapping) else {"value": payload}
        telemetry.record_event(
            signal, level="debug", data=data, logger_name="tte.editor"
        )

    def feed(self, chunk: bytes) -> List[ActionResult]:
        """Decode ``chunk`` and apply each event in order."""

        results: List[ActionResult] = []
        for event in self.decoder.decode(chunk):
            result = self.dispatcher.handle_key(event)
            results.append(result)
            if result.quit:
                self.running = False
                break
            self.renderer.refresh(
                self.context.buffer,
                self.context.cursor,
                raw=event.raw,
                status=result.message or result.status,
                full=result.edited,
            )
        return results


__all__ = ["RECORDED_SIGNALS", "Editor", "Terminal"]
