"""Structured logging utilities for the aide library.

This module provides correlation-aware logging so that host applications can
attribute charset fallbacks and lookup failures to the component and request
that triggered them.
"""

import logging
from typing import Any, Dict, Optional

from .config import get_config

PACKAGE_LOGGER_NAME = "batman_aide"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CorrelationLogger:
    """Logger that stamps every record with its component and correlation ID.

    Only the levels the library emits are exposed: ``debug`` for default
    charset fallbacks, ``info`` for benchmark progress and ``warning`` for
    failed charset and encoding lookups.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rpartition('.')[2]

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]]) -> None:
        fields: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        fields.update(extra or {})
        self.logger.log(level, message, extra=fields, stacklevel=3)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, extra)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)


def configure_logging(
    level: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """Attach a handler to the package logger and set its level.

    Calling this more than once replaces the previously attached handler
    instead of stacking duplicates.

    Args:
        level: Logging level name, e.g. ``"DEBUG"``; the configured
            ``log_level`` when omitted
        handler: Handler to attach; a ``StreamHandler`` when omitted
        fmt: Format string for the attached handler

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if getattr(existing, "_batman_aide_handler", False):
            package_logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._batman_aide_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel((level or get_config().log_level).upper())
    return package_logger
