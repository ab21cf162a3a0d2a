"""Editing verbs invoked through key bindings."""

from .core import (
    delete_backward,
    insert_char,
    insert_newline,
    move_down,
    move_left,
    move_right,
    move_up,
    quit_editor,
    report_unrecognized,
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
