"""
Configuration models: per-task parameters and the tool-wide container.

Loaded from enumgen.yml.  Field names are snake_case; the camelCase
names used by the Gradle plugin are accepted as aliases.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

PROJECT_DIR_PLACEHOLDER = "$projectDir"
DEFAULT_GENERATED_SOURCE_DIRECTORY = f"{PROJECT_DIR_PLACEHOLDER}/build/generated-sources"


class TaskConfig(BaseModel):
    """Parameters for one generation task.

    Attributes:
        target_package:          Package the generated enums are placed in.
            Must be set before the task can run.
        src_directory:           Directory searched for input files.  If None,
            the first existing default candidate is used.
        include_sub_directories: Whether to search sub-directories.
        enum_class_name:         If set, a single enum is created for all
            files found; otherwise each file gets its own enum.
    """

    target_package: str | None = Field(
        default=None,
        validation_alias=AliasChoices("target_package", "targetPackage"),
    )
    src_directory: str | None = Field(
        default=None,
        validation_alias=AliasChoices("src_directory", "srcDirectory"),
    )
    include_sub_directories: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_sub_directories", "includeSubDirectories"),
    )
    enum_class_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("enum_class_name", "enumClassName"),
    )


class ToolsConfig(BaseModel):
    """Container for all task parameters."""

    generated_source_directory: str = Field(
        default=DEFAULT_GENERATED_SOURCE_DIRECTORY,
        validation_alias=AliasChoices(
            "generated_source_directory", "generatedSourceDirectory"
        ),
    )
    create_bundle_lines: TaskConfig = Field(
        default_factory=TaskConfig,
        validation_alias=AliasChoices("create_bundle_lines", "createBundleLines"),
    )
    create_asset_enums: TaskConfig = Field(
        default_factory=TaskConfig,
        validation_alias=AliasChoices("create_asset_enums", "createAssetEnums"),
    )

    def task(self, name: str) -> TaskConfig | None:
        """Look up task parameters by CLI task name (e.g. ``bundle-lines``)."""
        return {
            "bundle-lines": self.create_bundle_lines,
            "asset-enums": self.create_asset_enums,
        }.get(name)
