"""Configuration model, YAML loading and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml

from . import telemetry
from .telemetry import ENV_PREFIX, record_event


class ConfigError(ValueError):
    """Raised when configuration data has the wrong shape."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key


@dataclass(slots=True)
class ServerConfig:
    session: Optional[str] = None
    timeout: int = 1800


@dataclass(slots=True)
class LanguageConfig:
    filetypes: tuple[str, ...]
    command: str
    roots: tuple[str, ...] = ()
    args: tuple[str, ...] = ()


@dataclass(slots=True)
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    language: Dict[str, LanguageConfig] = field(default_factory=dict)
    verbosity: int = 2

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        if not isinstance(data, Mapping):
            raise ConfigError("top-level configuration must be a mapping")

        server_data = _mapping(data.get("server", {}), "server")
        server = ServerConfig(
            session=_optional_str(server_data.get("session"), "server.session"),
            timeout=_int(server_data.get("timeout", 1800), "server.timeout"),
        )

        languages: Dict[str, LanguageConfig] = {}
        for language_id, raw in _mapping(data.get("language", {}), "language").items():
            key = f"language.{language_id}"
            entry = _mapping(raw, key)
            if "command" not in entry:
                raise ConfigError("missing 'command'", key=key)
            languages[str(language_id)] = LanguageConfig(
                filetypes=_strings(entry.get("filetypes", ()), f"{key}.filetypes"),
                command=str(entry["command"]),
                roots=_strings(entry.get("roots", ()), f"{key}.roots"),
                args=_strings(entry.get("args", ()), f"{key}.args"),
            )

        return cls(
            server=server,
            language=languages,
            verbosity=_int(data.get("verbosity", 2), "verbosity"),
        )


def _mapping(value: Any, key: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("expected a mapping", key=key)
    return value


def _strings(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Sequence):
        raise ConfigError("expected a list of strings", key=key)
    return tuple(str(item) for item in value)


def _int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"expected an integer, got {value!r}", key=key) from exc


def _optional_str(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError("expected a string", key=key)
    return value


def apply_env_overrides(config: Config) -> Config:
    session = os.getenv(f"{ENV_PREFIX}SESSION")
    if session:
        config.server.session = session
    timeout = os.getenv(f"{ENV_PREFIX}TIMEOUT")
    if timeout:
        config.server.timeout = _int(timeout, f"{ENV_PREFIX}TIMEOUT")
    return config


def configure_logging(config: Config) -> None:
    """Set the log level from ``verbosity`` unless the environment pins one."""

    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        return
    telemetry.configure(level=telemetry.level_for_verbosity(config.verbosity))


def load_config(path: str | Path) -> Config:
    """Read a YAML config file and apply ``KAK_ENGINE_*`` overrides."""

    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    config = apply_env_overrides(Config.from_mapping(data))
    configure_logging(config)
    record_event(
        "config.loaded",
        level="debug",
        data={"path": str(path), "languages": sorted(config.language)},
    )
    return config


def filetype_to_language_id_map(config: Config) -> Dict[str, str]:
    """Invert the per-language filetype lists into ``{filetype: language_id}``."""

    filetypes: Dict[str, str] = {}
    for language_id, language in config.language.items():
        for filetype in language.filetypes:
            filetypes[filetype] = language_id
    return filetypes


__all__ = [
    "ConfigError",
    "ServerConfig",
    "LanguageConfig",
    "Config",
    "apply_env_overrides",
    "configure_logging",
    "load_config",
    "filetype_to_language_id_map",
]
