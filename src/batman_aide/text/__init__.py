"""Text layer for the aide library.

This module provides null-safe string inspection and the search primitives it
delegates to.
"""

from . import sequences, strings
from .sequences import CharSequence

__all__ = [
    # Modules
    "sequences",
    "strings",
    # Types
    "CharSequence",
]
