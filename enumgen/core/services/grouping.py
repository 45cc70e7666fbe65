"""
Grouper: assign extracted keys to named buckets.

With a common name, every key of every file lands in one bucket.
Without one, each file gets a bucket named after its base name; files
whose base names sanitize to the same type name share a bucket.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from enumgen.core.models.source import Bucket, SourceFile
from enumgen.core.services.extractors.base import KeyExtractor
from enumgen.core.services.naming import to_type_name

logger = logging.getLogger(__name__)


def group(
    files: Iterable[SourceFile],
    common_name: str | None,
    extractor: KeyExtractor,
) -> list[Bucket]:
    """Extract keys from *files* and collect them into buckets.

    Args:
        files: Scanned source files.
        common_name: Name of a single bucket covering all files, or None
            to give each file its own bucket.
        extractor: Extractor used to read keys from each file.

    Returns:
        Buckets holding the union of their files' keys, ordered by name.

    Raises:
        EmptyNameError: If a bucket name cannot be sanitized.
        FileReadError: If a file cannot be read.
    """
    sanitized_common = to_type_name(common_name) if common_name is not None else None
    if sanitized_common is not None and sanitized_common != common_name:
        logger.warning(
            "The provided enum class name %s was changed to %s.",
            common_name,
            sanitized_common,
        )

    buckets: dict[str, Bucket] = {}
    for file in files:
        name = sanitized_common or to_type_name(file.stem)
        bucket = buckets.setdefault(name, Bucket(name=name))
        bucket.keys.update(extractor.extract(file))
        bucket.files.append(file)

    for bucket in buckets.values():
        logger.debug("%s: %d key(s) from %d file(s)", bucket.name, len(bucket.keys), len(bucket.files))
    return sorted(buckets.values(), key=lambda b: b.name)
