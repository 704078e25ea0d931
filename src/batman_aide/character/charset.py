"""Charset resolution.

Resolves an optional charset identifier, either a ``codecs.CodecInfo``
handle or a charset name, to a concrete codec, substituting the platform
default charset when none is supplied. Nothing is cached: every call performs
its own lookup.
"""

import codecs
import locale
from typing import Optional, Union

from batman_aide.shared.config import get_config, lookup_text_encoding
from batman_aide.shared.errors import UnsupportedCharsetError
from batman_aide.shared.logging import get_logger

Charset = codecs.CodecInfo
CharsetLike = Union[Charset, str, None]

logger = get_logger(__name__, component="charset")


def default_charset() -> Charset:
    """Return the platform default charset.

    The configured ``default_charset`` wins when set; otherwise the locale's
    preferred encoding is used.
    """
    configured = get_config().default_charset
    if configured is not None:
        return lookup_text_encoding(configured)
    return lookup_text_encoding(locale.getpreferredencoding(False))


def charset_name(charset: Charset) -> str:
    """Return the canonical name of ``charset``, e.g. ``"utf-8"``."""
    return charset.name


def to_charset(charset: CharsetLike = None) -> Charset:
    """Resolve a charset handle or name to a concrete charset.

    Args:
        charset: A ``CodecInfo`` handle, a charset name, or None

    Returns:
        The default charset for None, the handle itself for a handle, or the
        codec registered under the given name

    Raises:
        UnsupportedCharsetError: If the name is not a known charset, or the
            codec is a transform such as ``rot13`` rather than a text encoding
    """
    if charset is None:
        resolved = default_charset()
        logger.debug(
            "No charset given, using platform default",
            extra={"charset": resolved.name},
        )
        return resolved
    if isinstance(charset, codecs.CodecInfo):
        if not getattr(charset, "_is_text_encoding", True):
            logger.warning(
                f"Not a text encoding: {charset.name!r}",
                extra={"charset": charset.name},
            )
            raise UnsupportedCharsetError(charset.name)
        return charset
    try:
        return lookup_text_encoding(charset)
    except LookupError as e:
        logger.warning(
            f"Unsupported charset: {charset!r}", extra={"charset": charset}
        )
        raise UnsupportedCharsetError(charset) from e


def to_charset_name(name: Optional[str] = None) -> str:
    """Return ``name`` unchanged, or the default charset's name for None.

    The name is not validated or normalized, so ``to_charset_name("UTF-8")``
    returns ``"UTF-8"`` and unknown names come back verbatim.
    """
    if name is None:
        return charset_name(default_charset())
    return name
