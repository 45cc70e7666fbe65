"""
Domain models: pydantic types for the generation engine.

All models are re-exported here for convenient access:

    from enumgen.core.models import SourceFile, Bucket, GeneratedArtifact, ToolsConfig
"""

from enumgen.core.models.config import TaskConfig, ToolsConfig
from enumgen.core.models.source import Bucket, GeneratedArtifact, Identifier, SourceFile
from enumgen.core.models.template import GeneratedFile

__all__ = [
    # source.py
    "Bucket",
    "GeneratedArtifact",
    # template.py
    "GeneratedFile",
    "Identifier",
    "SourceFile",
    # config.py
    "TaskConfig",
    "ToolsConfig",
]
