"""
Name sanitizer: turn arbitrary strings into identifier-safe names.

Two conversions, both pure and deterministic:

    to_type_name("main menu")    -> "MainMenu"
    to_member_name("hello.world") -> "HELLO_WORLD"

Both results satisfy ``str.isidentifier()``.  Callers decide what to do
with failures: an empty type name raises ``EmptyNameError``, an empty
member name returns None and the caller drops the key.
"""

from __future__ import annotations

import keyword
import re

from enumgen.core.errors import EmptyNameError

_WHITESPACE = re.compile(r"\s+")


def _is_identifier_char(ch: str) -> bool:
    """True if *ch* may appear after the first character of an identifier."""
    return ("a" + ch).isidentifier()


def _trim_leading(name: str) -> str:
    """Drop leading characters that cannot start an identifier."""
    for i, ch in enumerate(name):
        if ch.isidentifier():
            return name[i:]
    return ""


def _capitalize(word: str) -> str:
    # str.capitalize() would lower-case the rest of the word
    return word[:1].upper() + word[1:]


def to_type_name(name: str) -> str:
    """Convert *name* into a PascalCase class name.

    Leading characters that cannot start an identifier are trimmed, the
    rest is split on whitespace and other non-identifier characters and
    each word gets an upper-case first letter.  Names that come out as a
    keyword (``none`` -> ``None``) get a trailing underscore.

    Raises:
        EmptyNameError: If nothing usable remains.
    """
    trimmed = _trim_leading(name)
    words = "".join(ch if _is_identifier_char(ch) else " " for ch in trimmed).split()
    result = "".join(_capitalize(w) for w in words)
    if keyword.iskeyword(result):
        result += "_"
    if not result.isidentifier():
        raise EmptyNameError(name)
    return result


def to_member_name(name: str) -> str | None:
    """Convert a raw key into an UPPER_CASE enum member name.

    Characters that are neither whitespace nor valid in an identifier
    (``.`` is the common case) become ``_``; whitespace is removed.

    Returns:
        The member name, or None if the key cannot be converted.
    """
    trimmed = "".join(
        ch if ch.isspace() or _is_identifier_char(ch) else "_"
        for ch in _trim_leading(name)
    )
    result = "".join(w.upper() for w in _WHITESPACE.split(trimmed))
    if not result.isidentifier():
        return None
    return result
