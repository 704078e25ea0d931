"""Shared utilities for the aide library.

This module provides the configuration object, exception types and logging
helpers used across all sub-packages.
"""

from .config import (
    AideConfig,
    get_config,
)
from .errors import (
    AideError,
    ConfigError,
    ConfigValidationError,
    UnsupportedCharsetError,
    UnsupportedEncodingError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "AideConfig",
    "get_config",
    "AideError",
    "ConfigError",
    "ConfigValidationError",
    "UnsupportedCharsetError",
    "UnsupportedEncodingError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
