"""Exception types raised by the aide library.

Only charset and encoding lookups can fail; every classifier is total and
reports "no meaningful answer" through its documented default instead.
"""

from typing import List, Optional


class AideError(Exception):
    """Base exception for all aide library errors."""


class UnsupportedCharsetError(AideError, LookupError):
    """Raised when a charset name is not recognized by the platform."""

    def __init__(self, charset_name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Unsupported charset: {charset_name!r}")
        self.charset_name = charset_name


class UnsupportedEncodingError(AideError, LookupError):
    """Raised when text is encoded with an unrecognized encoding name."""

    def __init__(self, encoding_name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Unsupported encoding: {encoding_name!r}")
        self.encoding_name = encoding_name


class ConfigError(AideError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
