"""
File scanner: find the files an extractor wants to process.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from enumgen.core.errors import DirectoryNotFoundError
from enumgen.core.models.source import SourceFile

logger = logging.getLogger(__name__)


def scan(
    root: Path,
    recursive: bool,
    is_eligible: Callable[[str], bool],
) -> list[SourceFile]:
    """Collect the files that will be processed.

    Args:
        root: The directory that will be searched.
        recursive: Whether to include the whole subtree or only direct children.
        is_eligible: Predicate on the bare file name.

    Returns:
        Eligible files, sorted by path.

    Raises:
        DirectoryNotFoundError: If *root* is missing or not a directory.
    """
    if not root.is_dir():
        raise DirectoryNotFoundError(root)

    candidates = root.absolute().rglob("*") if recursive else root.absolute().iterdir()
    found = [
        SourceFile.from_path(p)
        for p in candidates
        if p.is_file() and is_eligible(p.name)
    ]
    found.sort(key=lambda f: f.path)

    logger.debug(
        "Scanned %s (%s): %d eligible file(s)",
        root,
        "recursive" if recursive else "top level",
        len(found),
    )
    return found
