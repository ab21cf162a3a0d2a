"""Editor state, key dispatch, and the read-decode-mutate-render loop.

``dispatcher`` and ``loop`` are imported from their modules directly; this
package only re-exports the context types that actions depend on.
"""

from .context import ActionResult, EditorBus, EditorContext

__all__ = ["ActionResult", "EditorBus", "EditorContext"]
