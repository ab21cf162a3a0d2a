"""Raw-mode terminal text editor with C-like syntax highlighting."""

__all__ = [
    "actions",
    "app",
    "buffer",
    "editor",
    "errors",
    "keymaps",
    "render",
    "runtime",
    "syntax",
    "terminal",
]

__version__ = "0.1.0"
