"""Terminal rendering of the buffer and status footer."""

from .renderer import Renderer, Screen, render_spans

__all__ = ["Renderer", "Screen", "render_spans"]
