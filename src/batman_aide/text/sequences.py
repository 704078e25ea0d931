"""Search primitives over character sequences.

These helpers do the scanning for the null-safe wrappers in
:mod:`batman_aide.text.strings`. They expect non-None arguments and apply
the classic ``indexOf``/``lastIndexOf`` start-offset conventions, which
differ from Python's slicing rules: a negative start is never counted from
the end of the sequence.
"""

from typing import Sequence, Union

INDEX_NOT_FOUND = -1

CharSequence = Union[str, Sequence[str]]


def _as_str(seq: CharSequence) -> str:
    return seq if isinstance(seq, str) else "".join(seq)


def index_of(seq: CharSequence, search: CharSequence, start: int = 0) -> int:
    """Find the first index of ``search`` in ``seq`` at or after ``start``.

    Args:
        seq: Sequence to search in
        search: Sequence to look for
        start: Start offset; negative values are treated as 0

    Returns:
        Index of the first match, or ``INDEX_NOT_FOUND``. An empty ``search``
        matches at ``start`` clamped to ``[0, len(seq)]``.
    """
    text = _as_str(seq)
    target = _as_str(search)
    size = len(text)

    if start < 0:
        start = 0
    if start >= size:
        return size if not target else INDEX_NOT_FOUND
    return text.find(target, start)


def index_of_char(seq: CharSequence, ch: str, start: int = 0) -> int:
    """Find the first index of the single character ``ch`` at or after ``start``."""
    if len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    text = _as_str(seq)
    if start < 0:
        start = 0
    if start >= len(text):
        return INDEX_NOT_FOUND
    return text.find(ch, start)


def last_index_of(seq: CharSequence, search: CharSequence, start: int) -> int:
    """Find the last index of ``search`` in ``seq`` starting at or before ``start``.

    Args:
        seq: Sequence to search in
        search: Sequence to look for
        start: Highest index a match may start at; values beyond the last
            possible match position are clamped

    Returns:
        Index of the last match, or ``INDEX_NOT_FOUND``
    """
    text = _as_str(seq)
    target = _as_str(search)

    start = min(start, len(text) - len(target))
    if start < 0:
        return INDEX_NOT_FOUND
    return text.rfind(target, 0, start + len(target))


def region_matches(
    seq: CharSequence,
    ignore_case: bool,
    this_start: int,
    other: CharSequence,
    other_start: int,
    length: int,
) -> bool:
    """Compare a region of ``seq`` with a region of ``other``.

    Regions that start at a negative offset, have a negative length or run
    past the end of either sequence never match.
    """
    if this_start < 0 or other_start < 0 or length < 0:
        return False
    if len(seq) - this_start < length or len(other) - other_start < length:
        return False

    for offset in range(length):
        c1 = seq[this_start + offset]
        c2 = other[other_start + offset]
        if c1 == c2:
            continue
        if not ignore_case:
            return False
        # Some scripts only agree after folding one way or the other
        if c1.upper() != c2.upper() and c1.lower() != c2.lower():
            return False
    return True
