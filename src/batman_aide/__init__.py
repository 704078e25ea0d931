"""Batman Aide.

Null-safe, stateless helper functions over strings, characters, arrays and
charsets, in the spirit of Apache Commons Lang and Google Guava.

Every function accepts None wherever a value is expected and answers with a
documented default instead of raising. The only operations that can fail are
charset and encoding lookups by name.
"""

__version__ = "1.0.0"
__author__ = "Batman Aide Team"

# Charset resolution
from .character.charset import default_charset, to_charset, to_charset_name

# Errors
from .shared.errors import (
    AideError,
    UnsupportedCharsetError,
    UnsupportedEncodingError,
)

# String inspection
from .text.strings import (
    CR,
    EMPTY,
    INDEX_NOT_FOUND,
    LF,
    SPACE,
    all_blank,
    all_empty,
    any_blank,
    any_empty,
    get_bytes,
    index_of,
    is_all_blank,
    is_all_empty,
    is_all_lower_case,
    is_all_upper_case,
    is_alpha,
    is_alpha_space,
    is_alpha_whitespace,
    is_alphanumeric,
    is_alphanumeric_space,
    is_any_blank,
    is_any_empty,
    is_any_lower_case,
    is_any_upper_case,
    is_ascii_printable,
    is_blank,
    is_empty,
    is_mixed_case,
    is_none_blank,
    is_none_empty,
    is_none_lower_case,
    is_none_upper_case,
    is_not_blank,
    is_not_empty,
    is_numeric,
    is_numeric_space,
    is_numeric_whitespace,
    is_whitespace,
    length,
    none_blank,
    none_empty,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Constants
    "CR",
    "EMPTY",
    "INDEX_NOT_FOUND",
    "LF",
    "SPACE",

    # Charset resolution
    "default_charset",
    "to_charset",
    "to_charset_name",

    # Length and bytes
    "length",
    "get_bytes",

    # Emptiness and blankness
    "is_empty",
    "is_not_empty",
    "is_blank",
    "is_not_blank",
    "is_all_empty",
    "is_any_empty",
    "is_none_empty",
    "is_all_blank",
    "is_any_blank",
    "is_none_blank",
    "all_empty",
    "any_empty",
    "none_empty",
    "all_blank",
    "any_blank",
    "none_blank",

    # Case
    "is_all_lower_case",
    "is_any_lower_case",
    "is_none_lower_case",
    "is_all_upper_case",
    "is_any_upper_case",
    "is_none_upper_case",
    "is_mixed_case",

    # Character classes
    "is_alpha",
    "is_alphanumeric",
    "is_alpha_space",
    "is_alpha_whitespace",
    "is_alphanumeric_space",
    "is_numeric",
    "is_numeric_space",
    "is_numeric_whitespace",
    "is_whitespace",
    "is_ascii_printable",

    # Search
    "index_of",

    # Errors
    "AideError",
    "UnsupportedCharsetError",
    "UnsupportedEncodingError",
]
