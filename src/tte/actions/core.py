"""Core navigation and editing verbs bound to key kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tte.buffer import CursorModel
from tte.editor.context import ActionResult, EditorContext

if TYPE_CHECKING:
    from tte.keymaps.models import KeyEvent


def _motion(
    context: EditorContext, step: Callable[[CursorModel], bool], name: str
) -> ActionResult:
    moved = step(context.cursor)
    if not moved:
        return ActionResult(consumed=True, status="noop", message=name)
    return ActionResult(consumed=True, status="moved", message=name, moved=True)


def move_left(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    return _motion(context, CursorModel.move_left, "left")


def move_right(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    return _motion(context, CursorModel.move_right, "right")


def move_up(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    return _motion(context, CursorModel.move_up, "up")


def move_down(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    return _motion(context, CursorModel.move_down, "down")


def insert_char(context: EditorContext, event: KeyEvent) -> ActionResult:
    if event.byte is None:
        return ActionResult(consumed=False, status="ignored")
    context.cursor.insert_char(event.byte)
    context.bus.emit(
        "buffer.insert", {"offset": context.cursor.offset - 1, "byte": event.byte}
    )
    return ActionResult(consumed=True, status="edited", edited=True, moved=True)


def insert_newline(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    context.cursor.insert_newline()
    context.bus.emit(
        "buffer.insert", {"offset": context.cursor.offset - 1, "byte": 0x0A}
    )
    return ActionResult(consumed=True, status="edited", edited=True, moved=True)


def delete_backward(context: EditorContext, event: KeyEvent) -> ActionResult:
    del event
    if not context.cursor.delete_backward():
        return ActionResult(consumed=True, status="noop", message="backspace")
    context.bus.emit("buffer.delete", {"offset": context.cursor.offset})
    return ActionResult(consumed=True, status="edited", edited=True, moved=True)


def quit_editor(context: EditorContext, event: KeyEvent) -> ActionResult:
    context.bus.emit("editor.quit", {"raw": event.raw})
    return ActionResult(consumed=True, status="quit", quit=True)


def report_unrecognized(context: EditorContext, event: KeyEvent) -> ActionResult:
    context.bus.emit("input.unrecognized", {"raw": event.raw})
    return ActionResult(
        consumed=True,
        status="unrecognized",
        message=f"unrecognized input {event.raw!r}",
    )


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "insert_char",
    "insert_newline",
    "delete_backward",
    "quit_editor",
    "report_unrecognized",
]
