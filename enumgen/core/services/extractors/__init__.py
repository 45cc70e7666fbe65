"""
Key extractors, one per input format, selected by task name.

    extractor = get_extractor("bundle-lines")
    extractor = get_extractor("asset-enums", suffix=".pack")
"""

from __future__ import annotations

from typing import Any

from enumgen.core.errors import ConfigurationError
from enumgen.core.services.extractors.atlas import AtlasExtractor
from enumgen.core.services.extractors.base import KeyExtractor
from enumgen.core.services.extractors.properties import PropertiesExtractor

EXTRACTORS: dict[str, type] = {
    "bundle-lines": PropertiesExtractor,
    "asset-enums": AtlasExtractor,
}


def get_extractor(task: str, **overrides: Any) -> KeyExtractor:
    """Build the extractor for *task*, with optional field overrides.

    Raises:
        ConfigurationError: If *task* is not a known task name.
    """
    cls = EXTRACTORS.get(task)
    if cls is None:
        raise ConfigurationError(
            f"Unknown task '{task}'. Known tasks: {', '.join(sorted(EXTRACTORS))}"
        )
    return cls(**overrides)


__all__ = [
    "EXTRACTORS",
    "AtlasExtractor",
    "KeyExtractor",
    "PropertiesExtractor",
    "get_extractor",
]
