"""Null-safe string inspection.

Every function in this module accepts None where a character sequence is
expected and never raises for it: absence is a valid input with a documented
answer. Whether None behaves like the empty string depends on the function,
and that distinction is part of the contract:

============================  =======  =======
Function                      None     ""
============================  =======  =======
``is_empty`` / ``is_blank``   True     True
``is_all_*_case``             False    False
``is_none_*_case``            True     True
``is_alpha``, ``is_numeric``  False    False
``is_*_space``                False    True
``is_*_whitespace``           False    True
``is_ascii_printable``        False    True
============================  =======  =======

Every scan runs left to right and stops at the first character that decides
the answer.
"""

from typing import Callable, Optional, Sequence

from batman_aide.array import arrays
from batman_aide.character import chars
from batman_aide.character.charset import CharsetLike, to_charset, to_charset_name
from batman_aide.shared.errors import UnsupportedEncodingError
from batman_aide.shared.logging import get_logger

from . import sequences
from .sequences import CharSequence

SPACE = " "
EMPTY = ""
LF = "\n"
CR = "\r"
INDEX_NOT_FOUND = sequences.INDEX_NOT_FOUND

CharPredicate = Callable[[str], bool]

logger = get_logger(__name__, component="strings")


def _is_space(ch: str) -> bool:
    return ch == SPACE


def _every(seq: CharSequence, predicate: CharPredicate) -> bool:
    return all(predicate(ch) for ch in seq)


def _some(seq: CharSequence, predicate: CharPredicate) -> bool:
    return any(predicate(ch) for ch in seq)


# Length and bytes

def length(seq: Optional[CharSequence]) -> int:
    """Return the number of characters in ``seq``, or 0 for None."""
    return 0 if seq is None else len(seq)


def get_bytes(text: Optional[str], charset: CharsetLike = None) -> bytes:
    """Encode ``text`` into bytes.

    Args:
        text: Text to encode; None yields ``EMPTY_BYTES``
        charset: A ``CodecInfo`` handle, a charset name, or None for the
            platform default charset

    Returns:
        The encoded bytes. Characters the charset cannot represent are
        replaced by the charset's replacement byte.

    Raises:
        UnsupportedEncodingError: If ``charset`` is a name the platform does
            not recognize as a text encoding
        UnsupportedCharsetError: If ``charset`` is a handle for a transform
            codec such as ``rot13``
    """
    if text is None:
        return arrays.EMPTY_BYTES

    if isinstance(charset, str):
        name = to_charset_name(charset)
        try:
            return text.encode(name, errors="replace")
        except LookupError as e:
            logger.warning(
                f"Unsupported encoding: {name!r}", extra={"encoding": name}
            )
            raise UnsupportedEncodingError(name) from e

    codec = to_charset(charset)
    encoded, _ = codec.encode(text, "replace")
    return encoded


# Emptiness and blankness

def is_empty(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is None or has no characters.

    >>> is_empty(None), is_empty(""), is_empty(" ")
    (True, True, False)
    """
    return length(seq) == 0


def is_not_empty(seq: Optional[CharSequence]) -> bool:
    return not is_empty(seq)


def is_blank(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is None, empty, or whitespace only.

    >>> is_blank(None), is_blank(" \\t"), is_blank(" a ")
    (True, True, False)
    """
    if is_empty(seq):
        return True
    return _every(seq, chars.is_whitespace)  # type: ignore[arg-type]


def is_not_blank(seq: Optional[CharSequence]) -> bool:
    return not is_blank(seq)


# Quantifiers over arrays of sequences.
#
# The array forms take the array itself, which may be None. The varargs
# forms collect their arguments into a tuple, so calling them with no
# arguments is the empty array while calling them with a single None is an
# array holding one absent element:
#
#     any_empty(None)     -> False  (no elements)
#     is_any_empty()      -> False  (no elements)
#     is_any_empty(None)  -> True   (one absent element)

def all_empty(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    """Check whether every element of ``seqs`` is empty.

    Vacuously True for a None or empty array.
    """
    if arrays.is_empty(seqs):
        return True
    return all(is_empty(seq) for seq in seqs)  # type: ignore[union-attr]


def any_empty(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    """Check whether at least one element of ``seqs`` is empty.

    False for a None or empty array.
    """
    if arrays.is_empty(seqs):
        return False
    return any(is_empty(seq) for seq in seqs)  # type: ignore[union-attr]


def none_empty(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    return not any_empty(seqs)


def all_blank(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    """Check whether every element of ``seqs`` is blank.

    Vacuously True for a None or empty array.
    """
    if arrays.is_empty(seqs):
        return True
    return all(is_blank(seq) for seq in seqs)  # type: ignore[union-attr]


def any_blank(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    """Check whether at least one element of ``seqs`` is blank.

    False for a None or empty array.
    """
    if arrays.is_empty(seqs):
        return False
    return any(is_blank(seq) for seq in seqs)  # type: ignore[union-attr]


def none_blank(seqs: Optional[Sequence[Optional[CharSequence]]]) -> bool:
    return not any_blank(seqs)


def is_all_empty(*seqs: Optional[CharSequence]) -> bool:
    """Varargs form of :func:`all_empty`.

    >>> is_all_empty(), is_all_empty(None, ""), is_all_empty(None, "a")
    (True, True, False)
    """
    return all_empty(seqs)


def is_any_empty(*seqs: Optional[CharSequence]) -> bool:
    """Varargs form of :func:`any_empty`.

    >>> is_any_empty(), is_any_empty(None), is_any_empty("a", "b")
    (False, True, False)
    """
    return any_empty(seqs)


def is_none_empty(*seqs: Optional[CharSequence]) -> bool:
    return none_empty(seqs)


def is_all_blank(*seqs: Optional[CharSequence]) -> bool:
    """Varargs form of :func:`all_blank`."""
    return all_blank(seqs)


def is_any_blank(*seqs: Optional[CharSequence]) -> bool:
    """Varargs form of :func:`any_blank`.

    >>> is_any_blank(), is_any_blank(None), is_any_blank("a", " ")
    (False, True, True)
    """
    return any_blank(seqs)


def is_none_blank(*seqs: Optional[CharSequence]) -> bool:
    return none_blank(seqs)


# Case

def is_all_lower_case(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is non-empty and every character is lowercase.

    >>> is_all_lower_case("abc"), is_all_lower_case("ab c"), is_all_lower_case("")
    (True, False, False)
    """
    if is_empty(seq):
        return False
    return _every(seq, chars.is_lower_case)  # type: ignore[arg-type]


def is_any_lower_case(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains at least one lowercase character."""
    if is_empty(seq):
        return False
    return _some(seq, chars.is_lower_case)  # type: ignore[arg-type]


def is_none_lower_case(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains no lowercase character. True for None."""
    if is_empty(seq):
        return True
    return not _some(seq, chars.is_lower_case)  # type: ignore[arg-type]


def is_all_upper_case(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is non-empty and every character is uppercase.

    >>> is_all_upper_case("ABC"), is_all_upper_case("A1C")
    (True, False)
    """
    if is_empty(seq):
        return False
    return _every(seq, chars.is_upper_case)  # type: ignore[arg-type]


def is_any_upper_case(seq: Optional[CharSequence]) -> bool:
    if is_empty(seq):
        return False
    return _some(seq, chars.is_upper_case)  # type: ignore[arg-type]


def is_none_upper_case(seq: Optional[CharSequence]) -> bool:
    if is_empty(seq):
        return True
    return not _some(seq, chars.is_upper_case)  # type: ignore[arg-type]


def is_mixed_case(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains both uppercase and lowercase characters.

    Sequences shorter than two characters are never mixed case. Non-cased
    characters are ignored.

    >>> is_mixed_case("aBc"), is_mixed_case("a1"), is_mixed_case("A")
    (True, False, False)
    """
    if length(seq) <= 1:
        return False

    contains_upper = False
    contains_lower = False
    for ch in seq:  # type: ignore[union-attr]
        if chars.is_upper_case(ch):
            contains_upper = True
        elif chars.is_lower_case(ch):
            contains_lower = True
        if contains_upper and contains_lower:
            return True
    return False


# Character classes

def is_alpha(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is non-empty and contains only Unicode letters."""
    if is_empty(seq):
        return False
    return _every(seq, chars.is_letter)  # type: ignore[arg-type]


def is_alphanumeric(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is non-empty and contains only letters or digits."""
    if is_empty(seq):
        return False
    return _every(seq, chars.is_letter_or_digit)  # type: ignore[arg-type]


def is_alpha_space(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains only letters and the space character.

    Only ``" "`` counts as a space here; tabs and newlines do not. None is
    False but the empty string is True.
    """
    if seq is None:
        return False
    return _every(seq, lambda ch: _is_space(ch) or chars.is_letter(ch))


def is_alpha_whitespace(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains only letters and whitespace."""
    if seq is None:
        return False
    return _every(seq, lambda ch: chars.is_whitespace(ch) or chars.is_letter(ch))


def is_alphanumeric_space(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains only letters, digits and the space character."""
    if seq is None:
        return False
    return _every(seq, lambda ch: _is_space(ch) or chars.is_letter_or_digit(ch))


def is_numeric(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` is non-empty and contains only Unicode digits.

    Decimal points and signs disqualify, so ``"1.5"`` and ``"-1"`` are not
    numeric. Digits from any script count.

    >>> is_numeric("123"), is_numeric("\\u0967\\u0968"), is_numeric("12.3")
    (True, True, False)
    """
    if is_empty(seq):
        return False
    return _every(seq, chars.is_digit)  # type: ignore[arg-type]


def is_numeric_space(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains only digits and the space character."""
    if seq is None:
        return False
    return _every(seq, lambda ch: _is_space(ch) or chars.is_digit(ch))


def is_numeric_whitespace(seq: Optional[CharSequence]) -> bool:
    if seq is None:
        return False
    return _every(seq, lambda ch: chars.is_whitespace(ch) or chars.is_digit(ch))


def is_whitespace(seq: Optional[CharSequence]) -> bool:
    """Check whether ``seq`` contains only whitespace. None is False, "" is True.

    Unlike :func:`is_blank`, None does not count as whitespace.
    """
    if seq is None:
        return False
    return _every(seq, chars.is_whitespace)


def is_ascii_printable(seq: Optional[CharSequence]) -> bool:
    """Check whether every character of ``seq`` is in the range 32 to 126."""
    if seq is None:
        return False
    return _every(seq, chars.is_ascii_printable)


# Search

def index_of(
    seq: Optional[CharSequence],
    search: Optional[CharSequence],
    start: int = 0,
) -> int:
    """Find the first index of ``search`` in ``seq`` at or after ``start``.

    Args:
        seq: Sequence to search in, may be None
        search: Sequence to find, may be None
        start: Start offset; negative values are treated as 0

    Returns:
        The first match index, or ``INDEX_NOT_FOUND`` (-1) when either
        argument is None or there is no match. An empty ``search`` matches at
        the start offset.

    >>> index_of("aabaabaa", "ab"), index_of("", ""), index_of(None, "a")
    (1, 0, -1)
    """
    if seq is None or search is None:
        return INDEX_NOT_FOUND
    return sequences.index_of(seq, search, start)
