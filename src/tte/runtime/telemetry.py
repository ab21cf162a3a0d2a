"""Structured logging for the editor, built on telelog.

stdout is the editor screen, so nothing is written to the console unless
``TTE_LOG_CONSOLE`` asks for it; logs normally go to ``TTE_LOG_FILE``.

``configure(...)`` -- adopt a config, a named preset, or the env defaults
``get_logger(name)`` -- cached logger for a subsystem
``record_event(name, ...)`` -- one ``event::<name>`` line with key/value data
``span(name, ...)`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TTE_"
DEFAULT_LOGGER_NAME = "tte"

_loggers: MutableMapping[str, Any] = {}
_active: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _env_on(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class LogSettings:
    """What the telelog config should look like before it is built."""

    level: str = "INFO"
    console: bool = False
    colored: bool = True
    json: bool = False
    path: Optional[str] = None
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        size = _env("LOG_BUFFER_SIZE")
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=_env_on("LOG_CONSOLE"),
            colored=not _env_on("NO_COLOR"),
            json=_env_on("LOG_JSON"),
            path=_env("LOG_FILE") or None,
            buffer_size=int(size or 2048) if _env_on("LOG_BUFFERED") else None,
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.path:
            config.with_file_output(self.path)
        if self.buffer_size:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


PRESETS: Dict[str, LogSettings] = {
    "development": LogSettings(level="DEBUG", path="tte-debug.log"),
    "production": LogSettings(level="INFO", path="tte.log", buffer_size=2048),
    "quiet": LogSettings(level="ERROR"),
}


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Replace the active telelog configuration.

    ``config`` is a ready ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. They are mutually exclusive. ``log_file`` overrides the
    output path of a preset or of the environment defaults.
    """

    global _active
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if config is None:
        if preset:
            try:
                settings = PRESETS[preset.lower()]
            except KeyError:
                raise ValueError(f"Unknown preset '{preset}'.") from None
        else:
            settings = LogSettings.from_env()
        if log_file:
            settings = replace(settings, path=log_file)
        config = settings.build()

    _active = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or DEFAULT_LOGGER_NAME
    log = _loggers.get(key)
    if log is None:
        if _active is None:
            configure()
        log = _loggers[key] = tl.Logger.with_config(key, _active)
    return log


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return repr(bytes(value))
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here is logged if the block fails."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``component=True`` also tracks the block as a component of the same
    name; a string names the component explicitly. ``metadata`` is attached
    as logger context while the block runs.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        name=name,
        component=name if component is True else component or None,
    )
    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if handle.component:
            stack.enter_context(log.track_component(handle.component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
