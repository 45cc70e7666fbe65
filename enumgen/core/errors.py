"""
Error taxonomy for the generation engine.

Every fatal condition derives from ``EnumGenError`` so entrypoints can
catch one type and report it.  ``EntryNameConversionFailure`` is the
only recoverable one: it is logged and recorded, never raised out of a run.
"""

from __future__ import annotations

from pathlib import Path


class EnumGenError(Exception):
    """Base class for all enumgen errors."""


class ConfigurationError(EnumGenError):
    """Raised when required configuration is missing or invalid."""


class DirectoryNotFoundError(EnumGenError):
    """Raised when the configured source directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Source directory not found or not a directory: {path}")


class FileReadError(EnumGenError):
    """Raised when a matched file cannot be read or decoded as text."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class EmptyNameError(EnumGenError):
    """Raised when a bucket name sanitizes to an empty type name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Name `{name}` cannot be automatically converted to a valid enum name."
        )


class EntryNameConversionFailure(EnumGenError):
    """A single key that cannot become a member name; recorded, not raised."""

    def __init__(self, key: str, bucket: str):
        self.key = key
        self.bucket = bucket
        super().__init__(
            f"Entry name `{key}` in {bucket} cannot be automatically converted "
            "and will be omitted."
        )


class EmissionError(EnumGenError):
    """Raised on an internal invariant violation while emitting source."""
