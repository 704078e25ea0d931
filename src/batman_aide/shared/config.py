"""Configuration for the aide library.

The only behavior that can be configured is default-charset resolution,
plus the verbosity of the package logger. Configuration objects are frozen,
so a loaded configuration can be shared freely.
"""

import codecs
import functools
import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigValidationError

ENV_DEFAULT_CHARSET = "BATMAN_AIDE_DEFAULT_CHARSET"
ENV_LOG_LEVEL = "BATMAN_AIDE_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def lookup_text_encoding(name: str) -> codecs.CodecInfo:
    """Look up ``name`` and require it to be a str-to-bytes text encoding.

    Raises:
        LookupError: If the codec is unknown, or is a transform such as
            ``rot13`` or ``base64`` rather than a text encoding
    """
    info = codecs.lookup(name)
    if not getattr(info, "_is_text_encoding", True):
        raise LookupError(f"{name!r} is not a text encoding")
    return info


@dataclass(frozen=True)
class AideConfig:
    """Process-wide settings for the aide library.

    Attributes:
        default_charset: Charset name used in place of the platform default,
            or None to ask the platform
        log_level: Level name applied to the package logger
    """

    default_charset: Optional[str] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate aide configuration."""
        if self.default_charset is not None:
            if not self.default_charset.strip():
                raise ConfigValidationError(
                    "default_charset must be a non-blank charset name or None",
                    field_name="default_charset",
                )
            try:
                lookup_text_encoding(self.default_charset)
            except LookupError as e:
                raise ConfigValidationError(
                    f"default_charset {self.default_charset!r} is not a known text encoding",
                    field_name="default_charset",
                    suggestions=["utf-8", "latin-1", "ascii"],
                ) from e

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {VALID_LOG_LEVELS}",
                field_name="log_level",
            )

    @property
    def log_level_value(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())

    def override(self, **kwargs: Any) -> "AideConfig":
        """Create a new configuration with specific overrides."""
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AideConfig":
        """Create configuration from a dictionary, ignoring unknown keys."""
        known = {name: data[name] for name in cls.__dataclass_fields__ if name in data}
        return cls(**known)

    @classmethod
    def from_json(cls, json_str: str) -> "AideConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AideConfig":
        """Create configuration from environment variables.

        Args:
            env: Optional mapping to use instead of ``os.environ``

        Returns:
            AideConfig populated from ``BATMAN_AIDE_DEFAULT_CHARSET`` and
            ``BATMAN_AIDE_LOG_LEVEL``; unset or empty variables keep defaults
        """
        source = env if env is not None else os.environ
        values: Dict[str, Any] = {}

        charset = source.get(ENV_DEFAULT_CHARSET)
        if charset:
            values["default_charset"] = charset

        level = source.get(ENV_LOG_LEVEL)
        if level:
            values["log_level"] = level.upper()

        return cls(**values)


@functools.lru_cache(maxsize=1)
def get_config() -> AideConfig:
    """Return the process-wide configuration, loaded once from the environment.

    Call ``get_config.cache_clear()`` to force a reload.
    """
    return AideConfig.from_env()
