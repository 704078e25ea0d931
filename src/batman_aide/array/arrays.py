"""Null-safe helpers over arrays.

An "array" here is any sized sequence, including ``bytes`` and tuples
collected from ``*args``. None is treated as an empty array.
"""

from typing import Optional, Sized

EMPTY_BYTES = b""


def length(array: Optional[Sized]) -> int:
    """Return the number of elements in ``array``, or 0 for None."""
    return 0 if array is None else len(array)


def is_empty(array: Optional[Sized]) -> bool:
    """Check whether ``array`` is None or has no elements."""
    return length(array) == 0


def is_not_empty(array: Optional[Sized]) -> bool:
    return not is_empty(array)
