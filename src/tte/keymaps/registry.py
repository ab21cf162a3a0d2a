"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from tte.runtime.telemetry import span

from .models import ActionRef, Binding, KeyEvent, KeyKind


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    kinds: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


class KeymapConflictError(RuntimeError):
    """Raised when a new binding targets a key kind that is already bound."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.kind.value}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the one-binding-per-kind table."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_kind: Dict[KeyKind, str] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "kind": binding.kind.value},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            existing_id = self._by_kind.get(binding.kind)
            if existing_id is not None and existing_id != binding.id:
                existing = self._bindings[existing_id]
                if not replace:
                    handle.add_metadata("conflicts", existing.id)
                    raise KeymapConflictError(binding, existing)
                self._bindings.pop(existing_id, None)

            previous = self._bindings.get(binding.id)
            if previous is not None and previous.kind is not binding.kind:
                self._by_kind.pop(previous.kind, None)

            self._bindings[binding.id] = binding
            self._by_kind[binding.kind] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is not None:
            self._by_kind.pop(binding.kind, None)
        return binding

    def resolve(self, event: KeyEvent) -> Optional[ResolutionMatch]:
        binding_id = self._by_kind.get(event.kind)
        if binding_id is None:
            return None
        binding = self._bindings[binding_id]
        action = self.get_action(binding.action_id)
        return ResolutionMatch(binding=binding, action=action)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            kinds=tuple(sorted(kind.value for kind in self._by_kind)),
        )


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
