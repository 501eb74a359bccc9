"""Logging, profiling and structured events for the editor, on top of telelog.

Callers use four functions:

``configure(...)`` -- pick a preset or hand over an explicit telelog config
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- one structured event line
``span(name, ...)`` -- profile a block, optionally as a tracked component

Loggers are cached per config, so look them up at the point of use rather
than holding on to one across a ``configure`` call.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXTRIGHTER_"
ROOT_LOGGER = "textrighter"
_TRUTHY = {"1", "true", "yes", "on"}

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


@dataclass(frozen=True)
class TelemetrySettings:
    """Environment-driven knobs for the default (non-preset) config."""

    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        def flag(name: str) -> bool:
            return (read(name) or "").lower() in _TRUTHY

        return cls(
            level=(read("LOG_LEVEL") or "INFO").upper(),
            console=not flag("DISABLE_CONSOLE"),
            color=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=read("LOG_FILE") or "",
            buffered=flag("LOG_BUFFERED"),
            buffer_size=int(read("LOG_BUFFER_SIZE") or "2048"),
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


def _development(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(settings.color)
    config.with_json_format(False)
    return config


def _production(settings: TelemetrySettings) -> Any:
    # The terminal belongs to the editor UI.
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(False)
    config.with_file_output(settings.log_file or "textrighter.log")
    config.with_buffering(True)
    return config


def _performance(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_file_output(settings.log_file or "textrighter-performance.log")
    config.with_buffering(True)
    config.with_buffer_size(settings.buffer_size)
    return config


PRESETS: Dict[str, Callable[[TelemetrySettings], Any]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def build_preset(name: str, settings: Optional[TelemetrySettings] = None) -> Any:
    try:
        factory = PRESETS[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown telemetry preset '{name}'") from exc
    config = factory(settings or TelemetrySettings.from_env())
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog config and drop every cached logger.

    ``config`` and ``preset`` are mutually exclusive; with neither, the
    config is rebuilt from ``TEXTRIGHTER_*`` environment variables.
    """

    global _active_config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = build_preset(preset)
    elif config is None:
        config = TelemetrySettings.from_env().build()
    _active_config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _active_config
    if _active_config is None:
        _active_config = TelemetrySettings.from_env().build()
    logger_name = name or ROOT_LOGGER
    log = _loggers.get(logger_name)
    if log is None:
        log = _loggers[logger_name] = tl.Logger.with_config(logger_name, _active_config)
    return log


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emitter(log: Any, level: str) -> Tuple[Callable[..., None], bool]:
    """Return ``(method, takes_pairs)`` for ``level`` on a telelog logger."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'")
    return plain, False


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, takes_pairs = _emitter(log, level)
    if takes_pairs:
        method(message, [(str(k), _stringify(v)) for k, v in payload.items()])
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` carrying ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; collects metadata known only inside the block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
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
    """Profile a block under ``name``.

    ``component=True`` also tracks the block as a component called ``name``;
    a string names the component explicitly. ``metadata`` is attached as
    logger context while the block runs. Exceptions are logged and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(log, name, component_name, dict(context))
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "build_preset",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
