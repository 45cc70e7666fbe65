"""
Source-side models: scanned files, extracted keys, buckets and artifacts.

All of these live for a single generation run only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceFile(BaseModel):
    """An eligible file found by the scanner."""

    model_config = ConfigDict(frozen=True)

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> SourceFile:
        path = path.absolute()
        return cls(path=path, name=path.name)

    @property
    def stem(self) -> str:
        """File name without its last extension."""
        return self.path.stem


class Identifier(BaseModel):
    """A sanitized member name paired with the key it was derived from."""

    model_config = ConfigDict(frozen=True)

    member_name: str
    original: str


class Bucket(BaseModel):
    """A named group of raw keys destined for one generated type."""

    name: str
    keys: set[str] = Field(default_factory=set)
    files: list[SourceFile] = Field(default_factory=list)


class GeneratedArtifact(BaseModel):
    """Everything the emitter needs to produce one module.

    ``decorator`` is an ``EnumDecorator`` supplied by the active extractor;
    it is not part of the serialized form.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    package: str
    type_name: str
    identifiers: list[Identifier] = Field(default_factory=list)
    decorator: Any = Field(default=None, exclude=True)

    @property
    def member_names(self) -> list[str]:
        return [i.member_name for i in self.identifiers]
