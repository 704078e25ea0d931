"""Character layer for the aide library.

This module provides charset resolution and single-character classification.
"""

from . import chars
from .charset import (
    Charset,
    CharsetLike,
    charset_name,
    default_charset,
    to_charset,
    to_charset_name,
)

__all__ = [
    # Modules
    "chars",
    "charset",
    # Charset resolution
    "Charset",
    "CharsetLike",
    "charset_name",
    "default_charset",
    "to_charset",
    "to_charset_name",
]
