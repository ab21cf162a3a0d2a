from __future__ import annotations

import pytest

from tte.keymaps import (
    ActionRef,
    Binding,
    KeyEvent,
    KeyKind,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in {binding.action_id for binding in bindings}:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolve_returns_bound_action() -> None:
    binding = Binding(id="key.up", kind=KeyKind.ARROW_UP, action_id="core.up")
    registry = build_registry([binding])

    match = registry.resolve(KeyEvent(KeyKind.ARROW_UP, raw=b"\x1b[A"))

    assert match is not None
    assert match.binding == binding
    assert match.action.id == "core.up"


def test_resolve_unbound_kind_returns_none() -> None:
    registry = build_registry([])

    assert registry.resolve(KeyEvent(KeyKind.ENTER, raw=b"\n")) is None


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(
            Binding(id="key.up", kind=KeyKind.ARROW_UP, action_id="missing")
        )


def test_second_binding_for_same_kind_conflicts() -> None:
    first = Binding(id="key.quit", kind=KeyKind.QUIT, action_id="core.quit")
    registry = build_registry([first])
    second = Binding(id="key.quit_alt", kind=KeyKind.QUIT, action_id="core.quit")

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(second)
    assert excinfo.value.existing == first

    registry.register_binding(second, replace=True)
    match = registry.resolve(KeyEvent(KeyKind.QUIT, raw=b"\x1b"))
    assert match is not None
    assert match.binding.id == "key.quit_alt"
    assert registry.stats().binding_count == 1


def test_unregister_binding_frees_the_kind() -> None:
    binding = Binding(id="key.char", kind=KeyKind.CHAR, action_id="core.insert")
    registry = build_registry([binding])

    assert registry.unregister_binding("key.char") == binding
    assert registry.resolve(KeyEvent.char(ord("a"))) is None
    assert registry.unregister_binding("key.char") is None


def test_default_keymap_covers_every_kind() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    stats = registry.stats()

    assert stats.kinds == tuple(sorted(kind.value for kind in KeyKind))
    assert stats.binding_count == len(KeyKind)


def test_action_ref_defaults_telemetry_name() -> None:
    action = make_action("core.thing")

    assert action.telemetry_name == "core.thing"
    with pytest.raises(TypeError):
        ActionRef(id="bad", handler="not callable")  # type: ignore[arg-type]
