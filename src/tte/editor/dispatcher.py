"""Key dispatcher resolving events to bound actions."""

from __future__ import annotations

from tte.keymaps import KeyEvent, KeymapRegistry, load_default_keymaps
from tte.runtime import telemetry

from .context import ActionResult, EditorContext


class KeyDispatcher:
    """Owns the keymap and runs one action per key event."""

    def __init__(
        self,
        context: EditorContext,
        *,
        registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.registry = registry or KeymapRegistry(logger_name="tte.keymaps")
        if load_defaults and registry is None:
            load_default_keymaps(self.registry)

    def handle_key(self, event: KeyEvent) -> ActionResult:
        match = self.registry.resolve(event)
        if match is None:
            telemetry.record_event(
                "dispatch.unbound",
                level="warning",
                data={"kind": event.kind.value, "raw": event.raw},
            )
            return ActionResult(consumed=False, status="unbound", message=event.token)

        with telemetry.span(
            name=f"dispatch::{match.action.telemetry_name}",
            component="dispatch",
            metadata={"key": event.token, "binding": match.binding.id},
        ) as handle:
            outcome = match.action(self.context, event)
            if isinstance(outcome, ActionResult):
                handle.add_metadata("status", outcome.status)
        if isinstance(outcome, ActionResult):
            return outcome
        return ActionResult(consumed=True)


__all__ = ["KeyDispatcher"]
