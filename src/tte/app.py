"""Command-line entry point: ``tte [FILE]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from tte.buffer import Buffer
from tte.editor import EditorContext
from tte.editor.loop import Editor, Terminal
from tte.errors import TerminalError, UnsupportedTerminalError
from tte.runtime import telemetry
from tte.runtime.config import EditorConfig
from tte.terminal import TerminalSession, require_supported_term

PROG = "tte"


def load_buffer(path: Optional[str], *, capacity: int) -> Buffer:
    """Seed a buffer from ``path``; no path gives an empty buffer."""

    if path is None:
        return Buffer(capacity=capacity)
    with open(path, "rb") as handle:
        content = handle.read()
    telemetry.record_event("buffer.load", data={"path": path, "bytes": len(content)})
    return Buffer.from_bytes(content, capacity=capacity, name=path)


def create_editor(buffer: Buffer, terminal: Terminal, config: EditorConfig) -> Editor:
    """Build an ``Editor`` with the default keymap, decoder and renderer."""

    return Editor(EditorContext.for_buffer(buffer), terminal, config=config)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Edit a file in a raw-mode terminal."
    )
    parser.add_argument("file", nargs="?", help="File whose contents seed the buffer")
    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Draw the buffer without syntax highlighting",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: $TTE_LOG_FILE)",
    )
    return parser.parse_args(argv)


def _report(message: str) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env().with_overrides(
        highlight=False if args.no_highlight else None,
        log_file=args.log_file,
    )
    if config.log_file:
        telemetry.configure(log_file=config.log_file)

    try:
        require_supported_term(supported=config.supported_terms)
    except UnsupportedTerminalError as exc:
        _report(str(exc))
        return 1

    try:
        buffer = load_buffer(args.file, capacity=config.initial_capacity)
    except OSError as exc:
        _report(f"{args.file}: {exc.strerror or exc}")
        return 1

    try:
        with TerminalSession(logger_name="tte.terminal") as session:
            return create_editor(buffer, session, config).run()
    except TerminalError as exc:
        telemetry.record_event(
            "terminal.fatal", level="error", data={"reason": str(exc)}
        )
        _report(str(exc))
        return 1
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
