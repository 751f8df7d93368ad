"""
Mapper configuration and environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

DEFAULT_ENV_PREFIX = "ERRORMAP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_ESCAPES = {
    "\\n": "\n",
    "\\r": "\r",
    "\\t": "\t",
}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_separator(value: str) -> str:
    for escaped, literal in _ESCAPES.items():
        value = value.replace(escaped, literal)
    return value


@dataclass
class MapperConfig:
    """
    Settings shared by the mapping helpers.

    Messages are joined with ``line_separator`` unless ``use_os_linesep`` is
    set, in which case the host platform's separator is used.
    """

    line_separator: str = "\n"
    use_os_linesep: bool = False
    source: str | None = None

    @property
    def separator(self) -> str:
        if self.use_os_linesep:
            return os.linesep
        return self.line_separator

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX, **kwargs: Any) -> "MapperConfig":
        """
        Build a config from ``<prefix>LINE_SEPARATOR`` and ``<prefix>USE_OS_LINESEP``.

        Unset variables fall back to the dataclass defaults; keyword arguments
        override both.
        """

        values: dict[str, Any] = {}
        separator_key = f"{prefix}LINE_SEPARATOR"
        os_linesep_key = f"{prefix}USE_OS_LINESEP"

        raw_separator = os.getenv(separator_key)
        if raw_separator:
            values["line_separator"] = _parse_separator(raw_separator)
        raw_os_linesep = os.getenv(os_linesep_key)
        if raw_os_linesep:
            values["use_os_linesep"] = _parse_bool(raw_os_linesep, key=os_linesep_key)

        values.update(kwargs)
        values.setdefault("source", prefix)
        return cls(**values)


_active_config = MapperConfig()


def get_config() -> MapperConfig:
    return _active_config


def set_config(config: MapperConfig) -> MapperConfig:
    """
    Install ``config`` as the process-wide default and return the previous one.
    """

    global _active_config
    previous = _active_config
    _active_config = config
    return previous
