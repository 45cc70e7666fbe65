"""
Key extractor protocol and shared file reading.

An extractor decides which files it can process and pulls the raw keys
out of one file.  It may also contribute an ``EnumDecorator`` that adds
format-specific members to the generated enum.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from enumgen.core.errors import FileReadError
from enumgen.core.models.source import SourceFile
from enumgen.core.services.generators.enum_module import EnumDecorator


# Only CR, LF and CRLF end a line
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@runtime_checkable
class KeyExtractor(Protocol):
    """Format-specific strategy used by the generation pipeline."""

    name: str
    decorator: EnumDecorator | None

    def is_eligible(self, filename: str) -> bool:
        """Return True if *filename* can be processed."""
        ...

    def extract(self, file: SourceFile) -> set[str]:
        """Return all raw keys found in *file*."""
        ...


def read_text(file: SourceFile, encoding: str = "utf-8") -> str:
    """Read a source file as text.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    try:
        return file.path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileReadError(file.path, f"not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(file.path, e.strerror or str(e)) from e


def split_lines(text: str) -> list[str]:
    """Split *text* on CR, LF and CRLF only."""
    return _LINE_BREAK.split(text)
