"""Tests for the sequence search primitives."""

import pytest

from batman_aide.text.sequences import (
    INDEX_NOT_FOUND,
    index_of,
    index_of_char,
    last_index_of,
    region_matches,
)


class TestIndexOf:
    """Test forward substring search."""

    @pytest.mark.parametrize("seq, search, start, expected", [
        ("aabaabaa", "ab", 0, 1),
        ("aabaabaa", "ab", 2, 4),
        ("aabaabaa", "ab", 5, INDEX_NOT_FOUND),
        ("aabaabaa", "b", 3, 5),
        ("aabaabaa", "", 0, 0),
        ("aabaabaa", "", 2, 2),
        ("aabaabaa", "", 8, 8),
        ("aabaabaa", "", 9, 8),
        ("aabaabaa", "a", 9, INDEX_NOT_FOUND),
        ("", "", 0, 0),
        ("", "x", 0, INDEX_NOT_FOUND),
        ("abc", "abcd", 0, INDEX_NOT_FOUND),
    ])
    def test_index_of(self, seq, search, start, expected):
        """Test substring search."""
        assert index_of(seq, search, start) == expected

    def test_negative_start_is_treated_as_zero(self):
        """Test that a negative start is clamped to zero."""
        # Python slicing would count -2 from the end and find index 6
        assert index_of("aabaabaa", "aa", -2) == 0
        assert index_of("aabaabaa", "", -5) == 0

    def test_accepts_character_lists(self):
        """Test searching lists of characters."""
        assert index_of(list("hello"), ["l", "o"]) == 3


class TestIndexOfChar:
    """Test single character search."""

    def test_finds_character(self):
        """Test single character search."""
        assert index_of_char("hello", "l") == 2
        assert index_of_char("hello", "l", 3) == 3

    def test_start_bounds(self):
        """Test character search start offsets."""
        assert index_of_char("hello", "h", -1) == 0
        assert index_of_char("hello", "o", 5) == INDEX_NOT_FOUND

    def test_missing_character(self):
        """Test searching for an absent character."""
        assert index_of_char("hello", "z") == INDEX_NOT_FOUND

    def test_rejects_longer_search(self):
        """Test that a multi-character needle is rejected."""
        with pytest.raises(ValueError):
            index_of_char("hello", "ll")


class TestLastIndexOf:
    """Test backward substring search."""

    @pytest.mark.parametrize("seq, search, start, expected", [
        ("aabaabaa", "ab", 8, 4),
        ("aabaabaa", "ab", 4, 4),
        ("aabaabaa", "ab", 3, 1),
        ("aabaabaa", "ab", 0, INDEX_NOT_FOUND),
        ("aabaabaa", "", 3, 3),
        ("aabaabaa", "", 20, 8),
        ("aabaabaa", "a", -1, INDEX_NOT_FOUND),
        ("ab", "abc", 5, INDEX_NOT_FOUND),
    ])
    def test_last_index_of(self, seq, search, start, expected):
        """Test backward substring search."""
        assert last_index_of(seq, search, start) == expected


class TestRegionMatches:
    """Test region comparison."""

    def test_case_sensitive(self):
        """Test case-sensitive region matching."""
        assert region_matches("Hello World", False, 6, "World", 0, 5)
        assert not region_matches("Hello World", False, 6, "world", 0, 5)

    def test_ignore_case(self):
        """Test case-insensitive region matching."""
        assert region_matches("Hello World", True, 6, "wORLD", 0, 5)

    def test_zero_length_always_matches_in_range(self):
        """Test that empty regions match inside bounds."""
        assert region_matches("abc", False, 3, "", 0, 0)

    @pytest.mark.parametrize("this_start, other_start, length", [
        (-1, 0, 1), (0, -1, 1), (0, 0, -1), (2, 0, 2), (0, 3, 1),
    ])
    def test_out_of_range_regions_never_match(self, this_start, other_start, length):
        """Test that out-of-range regions never match."""
        assert not region_matches("abc", False, this_start, "abc", other_start, length)
