"""Environment checks performed before the terminal is touched."""

from __future__ import annotations

import os
from typing import Mapping, Optional, Sequence

from tte.errors import UnsupportedTerminalError
from tte.runtime.config import SUPPORTED_TERMS


def require_supported_term(
    environ: Optional[Mapping[str, str]] = None,
    *,
    supported: Sequence[str] = SUPPORTED_TERMS,
) -> str:
    """Return ``TERM`` or raise ``UnsupportedTerminalError``."""

    env = os.environ if environ is None else environ
    term = env.get("TERM")
    expected = " or ".join(f"`{name}'" for name in supported)
    if not term:
        raise UnsupportedTerminalError(
            f"The environment variable TERM isn't set - it should be set to {expected}."
        )
    if term not in supported:
        raise UnsupportedTerminalError(
            f"The environment variable TERM is set to `{term}' - should be {expected}.",
            term=term,
        )
    return term


__all__ = ["require_supported_term"]
