"""Tests for the array helpers."""

import pytest

from batman_aide.array import EMPTY_BYTES, is_empty, is_not_empty, length


def test_empty_bytes_singleton():
    """Test the shared empty byte sequence."""
    assert EMPTY_BYTES == b""
    assert isinstance(EMPTY_BYTES, bytes)


@pytest.mark.parametrize("array, expected", [
    (None, 0), ((), 0), ([], 0), (b"", 0), ((None,), 1), ([1, 2, 3], 3), (b"ab", 2),
])
def test_length(array, expected):
    """Test null-safe array length."""
    assert length(array) == expected


@pytest.mark.parametrize("array, expected", [
    (None, True), ((), True), ([], True), (b"", True), ((None,), False), (["a"], False),
])
def test_is_empty(array, expected):
    """Test array emptiness and its negation."""
    assert is_empty(array) is expected
    assert is_not_empty(array) is (not expected)
