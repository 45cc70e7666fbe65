"""
Properties extractor: translation keys from .properties resource bundles.

The reader follows the usual resource-bundle line syntax:

  - ``#`` or ``!`` as first non-blank character starts a comment
  - key and value are separated by ``=``, ``:`` or whitespace
  - an odd number of trailing backslashes continues the logical line
  - ``\\t \\n \\r \\f \\uXXXX`` escapes; any other ``\\c`` is a literal ``c``

Locale variants (``menu_de.properties``) share the keys of their base
bundle, so files containing an underscore are not eligible.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass, field

from enumgen.core.errors import FileReadError
from enumgen.core.models.source import SourceFile
from enumgen.core.services.extractors.base import read_text, split_lines
from enumgen.core.services.generators.bundle_line import BundleLineDecorator
from enumgen.core.services.generators.enum_module import EnumDecorator

logger = logging.getLogger(__name__)

_BLANK = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


# ── Reader ──────────────────────────────────────────────────────


def _continues(line: str) -> bool:
    """True if the line ends with an odd number of backslashes."""
    return (len(line) - len(line.rstrip("\\"))) % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    lines = iter(split_lines(text))
    for raw in lines:
        line = raw.lstrip(_BLANK)
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            following = next(lines, None)
            line = line[:-1]
            if following is None:
                break
            line += following.lstrip(_BLANK)
        yield line


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its (still escaped) key and value."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _BLANK:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_BLANK)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_BLANK)
    return key, rest


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        i += 1
        if ch != "\\":
            out.append(ch)
            continue
        if i >= len(text):
            break
        ch = text[i]
        i += 1
        if ch == "u":
            digits = text[i:i + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(ch, ch))
    return "".join(out)


def load_properties(text: str) -> dict[str, str]:
    """Parse resource-bundle text into an ordered key/value mapping.

    Later duplicates overwrite earlier values.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        entries[_unescape(key)] = _unescape(value)
    return entries


# ── Extractor ───────────────────────────────────────────────────


@dataclass(frozen=True)
class PropertiesExtractor:
    """Accepts ``*.properties`` files whose name contains no underscore."""

    name: str = "bundle-lines"
    suffix: str = ".properties"
    encoding: str = "utf-8"
    decorator: EnumDecorator | None = field(default_factory=BundleLineDecorator)

    def is_eligible(self, filename: str) -> bool:
        return filename.endswith(self.suffix) and "_" not in filename

    def extract(self, file: SourceFile) -> set[str]:
        try:
            keys = set(load_properties(read_text(file, self.encoding)))
        except ValueError as e:
            raise FileReadError(file.path, str(e)) from e

        logger.debug("%s: %d key(s)", file.name, len(keys))
        return keys
