"""
Generated file model: the output of the emit phase.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A source file produced by the emit phase.

    Attributes:
        path:      Path relative to the generated-source root.
        content:   Full file content.
        overwrite: Whether to overwrite if it already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""
