"""Editor configuration assembled from defaults, environment, and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "TTE_"

DEFAULT_CAPACITY = 4096
DEFAULT_READ_SIZE = 64
SUPPORTED_TERMS: tuple[str, ...] = ("xterm", "xterm-256color")


def _env_int(environ: Mapping[str, str], key: str, fallback: int) -> int:
    value = environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_flag(environ: Mapping[str, str], key: str, fallback: bool) -> bool:
    raw = environ.get(f"{ENV_PREFIX}{key}")
    if raw is None:
        return fallback
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Runtime knobs for a single editor session."""

    initial_capacity: int = DEFAULT_CAPACITY
    read_size: int = DEFAULT_READ_SIZE
    highlight: bool = True
    supported_terms: tuple[str, ...] = SUPPORTED_TERMS
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        if self.read_size <= 0:
            raise ValueError("read_size must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        return cls(
            initial_capacity=_env_int(env, "INITIAL_CAPACITY", DEFAULT_CAPACITY),
            read_size=_env_int(env, "READ_SIZE", DEFAULT_READ_SIZE),
            highlight=_env_flag(env, "HIGHLIGHT", True),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE") or None,
        )

    def with_overrides(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` change applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_READ_SIZE",
    "SUPPORTED_TERMS",
    "EditorConfig",
]
