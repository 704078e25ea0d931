"""Single-character classification.

The predicates here follow the classic platform definitions used by Commons
Lang style helpers: letters and digits are Unicode-aware, whitespace covers
the Unicode separators except the non-breaking spaces, and the ``is_ascii_*``
family only ever accepts the 7-bit range.
"""

import unicodedata
from typing import FrozenSet

# ASCII ranges
ASCII_MAX = 0x80
ASCII_PRINTABLE_MIN = 0x20
ASCII_PRINTABLE_MAX = 0x7E
ASCII_DELETE = 0x7F

# Separator categories counted as whitespace
SEPARATOR_CATEGORIES: FrozenSet[str] = frozenset({"Zs", "Zl", "Zp"})

# Separators that are deliberately not whitespace
NON_BREAKING_SPACES: FrozenSet[str] = frozenset({"\u00a0", "\u2007", "\u202f"})

# Control characters that are whitespace: tab, line feed, vertical tab,
# form feed, carriage return and the four information separators
WHITESPACE_CONTROLS: FrozenSet[str] = frozenset(
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f"
)


def _check_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    return ch


def is_whitespace(ch: str) -> bool:
    """Check whether ``ch`` is a whitespace character.

    Space, line and paragraph separators qualify, except U+00A0, U+2007 and
    U+202F. Tab, line feed, vertical tab, form feed, carriage return and the
    file/group/record/unit separators (U+001C to U+001F) also qualify.
    """
    _check_char(ch)
    if ch in WHITESPACE_CONTROLS:
        return True
    if ch in NON_BREAKING_SPACES:
        return False
    return unicodedata.category(ch) in SEPARATOR_CATEGORIES


def is_letter(ch: str) -> bool:
    """Check whether ``ch`` is a Unicode letter (categories Lu, Ll, Lt, Lm, Lo)."""
    return _check_char(ch).isalpha()


def is_digit(ch: str) -> bool:
    """Check whether ``ch`` is a Unicode decimal digit (category Nd).

    Superscripts, fractions and other numeric symbols do not qualify.
    """
    return _check_char(ch).isdecimal()


def is_letter_or_digit(ch: str) -> bool:
    """Check whether ``ch`` is a Unicode letter or decimal digit."""
    _check_char(ch)
    return ch.isalpha() or ch.isdecimal()


def is_lower_case(ch: str) -> bool:
    """Check whether ``ch`` is a lowercase character."""
    return _check_char(ch).islower()


def is_upper_case(ch: str) -> bool:
    """Check whether ``ch`` is an uppercase character."""
    return _check_char(ch).isupper()


def is_ascii(ch: str) -> bool:
    """Check whether ``ch`` is 7-bit ASCII."""
    return ord(_check_char(ch)) < ASCII_MAX


def is_ascii_printable(ch: str) -> bool:
    """Check whether ``ch`` is ASCII printable, i.e. in the range 32 to 126.

    >>> is_ascii_printable("a")
    True
    >>> is_ascii_printable("\\x7f")
    False
    """
    return ASCII_PRINTABLE_MIN <= ord(_check_char(ch)) <= ASCII_PRINTABLE_MAX


def is_ascii_control(ch: str) -> bool:
    """Check whether ``ch`` is an ASCII control character (below 32 or 127)."""
    code = ord(_check_char(ch))
    return code < ASCII_PRINTABLE_MIN or code == ASCII_DELETE


def is_ascii_alpha_upper(ch: str) -> bool:
    return "A" <= _check_char(ch) <= "Z"


def is_ascii_alpha_lower(ch: str) -> bool:
    return "a" <= _check_char(ch) <= "z"


def is_ascii_alpha(ch: str) -> bool:
    return is_ascii_alpha_upper(ch) or is_ascii_alpha_lower(ch)


def is_ascii_numeric(ch: str) -> bool:
    return "0" <= _check_char(ch) <= "9"


def is_ascii_alphanumeric(ch: str) -> bool:
    return is_ascii_alpha(ch) or is_ascii_numeric(ch)
