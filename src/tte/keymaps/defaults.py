"""Built-in keymap binding every key kind to a core action."""

from __future__ import annotations

from tte.actions import core as core_actions

from .models import ActionRef, Binding, KeyKind
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.move_left",
        handler=core_actions.move_left,
        description="Move cursor left within the line",
    ),
    ActionRef(
        id="core.move_right",
        handler=core_actions.move_right,
        description="Move cursor right within the line",
    ),
    ActionRef(
        id="core.move_up",
        handler=core_actions.move_up,
        description="Move cursor to the previous line",
    ),
    ActionRef(
        id="core.move_down",
        handler=core_actions.move_down,
        description="Move cursor to the next line",
    ),
    ActionRef(
        id="core.insert_char",
        handler=core_actions.insert_char,
        description="Insert a printable character",
    ),
    ActionRef(
        id="core.insert_newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="core.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="core.quit",
        handler=core_actions.quit_editor,
        description="Leave the editor",
    ),
    ActionRef(
        id="core.unrecognized",
        handler=core_actions.report_unrecognized,
        description="Report input the decoder does not understand",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="key.left", kind=KeyKind.ARROW_LEFT, action_id="core.move_left"),
    Binding(id="key.right", kind=KeyKind.ARROW_RIGHT, action_id="core.move_right"),
    Binding(id="key.up", kind=KeyKind.ARROW_UP, action_id="core.move_up"),
    Binding(id="key.down", kind=KeyKind.ARROW_DOWN, action_id="core.move_down"),
    Binding(id="key.char", kind=KeyKind.CHAR, action_id="core.insert_char"),
    Binding(id="key.enter", kind=KeyKind.ENTER, action_id="core.insert_newline"),
    Binding(
        id="key.backspace", kind=KeyKind.BACKSPACE, action_id="core.delete_backward"
    ),
    Binding(id="key.quit", kind=KeyKind.QUIT, action_id="core.quit"),
    Binding(
        id="key.unrecognized",
        kind=KeyKind.UNRECOGNIZED,
        action_id="core.unrecognized",
    ),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
