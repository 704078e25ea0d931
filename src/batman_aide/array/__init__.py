"""Array helpers for the aide library."""

from .arrays import (
    EMPTY_BYTES,
    is_empty,
    is_not_empty,
    length,
)

__all__ = [
    "EMPTY_BYTES",
    "is_empty",
    "is_not_empty",
    "length",
]
