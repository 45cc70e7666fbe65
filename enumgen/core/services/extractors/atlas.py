"""
Atlas extractor: texture-region names from libGDX .atlas files.

Only the region-name / rotate-line adjacency matters:

    regionA
      rotate: false
      xy: 2, 2

Every line whose stripped text starts with ``rotate`` marks the most
recent non-blank line before it as a region name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from enumgen.core.models.source import SourceFile
from enumgen.core.services.extractors.base import read_text, split_lines
from enumgen.core.services.generators.enum_module import EnumDecorator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtlasExtractor:
    """Accepts ``*.atlas`` files whose name contains no underscore."""

    name: str = "asset-enums"
    suffix: str = ".atlas"
    marker: str = "rotate"
    encoding: str = "utf-8"
    decorator: EnumDecorator | None = None

    def is_eligible(self, filename: str) -> bool:
        return filename.endswith(self.suffix) and "_" not in filename

    def extract(self, file: SourceFile) -> set[str]:
        entries: set[str] = set()
        last_line: str | None = None
        for line in split_lines(read_text(file, self.encoding)):
            stripped = line.strip()
            if stripped.startswith(self.marker) and last_line is not None:
                entries.add(last_line)
            if stripped:
                last_line = line

        logger.debug("%s: %d region(s)", file.name, len(entries))
        return entries
