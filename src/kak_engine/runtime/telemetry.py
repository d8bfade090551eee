"""Logging and profiling for kak_engine, built on telelog.

Loggers share one telelog configuration. Its level comes from an explicit
``configure(level=...)`` call (``load_config`` derives one from
``Config.verbosity``) or from ``KAK_ENGINE_LOG_LEVEL``. Setting
``KAK_ENGINE_LOG_FILE`` moves output off the console, which the editor may be
reading.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KAK_ENGINE_"
LOGGER_NAME = "kak_engine"
DEFAULT_LEVEL = "INFO"

# Indexed by ``Config.verbosity``; anything above the last entry logs everything.
VERBOSITY_LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG")

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None
_level = DEFAULT_LEVEL


def level_for_verbosity(verbosity: int) -> str:
    index = max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))
    return VERBOSITY_LEVELS[index]


def active_level() -> str:
    return _level


def _build_config(level: str) -> Any:
    config = tl.Config()
    config.with_min_level(level)

    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        config.with_console_output(False)
        config.with_file_output(log_file)
    else:
        config.with_console_output(True)
        config.with_colored_output(os.getenv("NO_COLOR") is None)

    config.with_profiling(True)
    return config


def configure(*, level: Optional[str] = None) -> None:
    """Rebuild the shared configuration; cached loggers are dropped."""

    global _config, _level
    _level = (level or os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or DEFAULT_LEVEL).upper()
    _config = _build_config(_level)
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or LOGGER_NAME
    if logger_name not in _loggers:
        if _config is None:
            configure()
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _log(logger: Any, level: str, message: str, data: Mapping[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in data.items()]
    with_data = getattr(logger, f"{level}_with", None)
    if with_data is not None:
        with_data(message, pairs)
    else:
        getattr(logger, level)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _log(get_logger(logger_name), level, f"event::{name}", dict(data or {}))


@dataclass
class SpanHandle:
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = str(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``metadata`` is attached as logger context while the block runs. A failing
    block is logged with everything gathered on the handle, then re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(name=name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            failure = {**handle.metadata, "reason": exc}
            _log(log, "error", f"span::{name} failed", failure)
            raise
        finally:
            for key in metadata or {}:
                log.remove_context(key)


__all__ = [
    "ENV_PREFIX",
    "VERBOSITY_LEVELS",
    "SpanHandle",
    "active_level",
    "configure",
    "get_logger",
    "level_for_verbosity",
    "record_event",
    "span",
]
