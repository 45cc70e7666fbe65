"""
Generate use case: run one extractor over a source directory and write
one enum module per bucket.

Phases run strictly in sequence: scan, extract + group, sanitize, emit,
write.  Nothing is written unless every earlier phase succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from enumgen.core.errors import ConfigurationError
from enumgen.core.models.config import TaskConfig, ToolsConfig
from enumgen.core.models.template import GeneratedFile
from enumgen.core.observability.logging_config import task_context
from enumgen.core.services.extractors import KeyExtractor, get_extractor
from enumgen.core.services.generators.enum_module import build_artifact, generate_enum_module
from enumgen.core.services.grouping import group
from enumgen.core.services.scanner import scan

logger = logging.getLogger(__name__)

BUNDLE_LINES_TASK = "bundle-lines"
ASSET_ENUMS_TASK = "asset-enums"


@dataclass
class GenerationResult:
    """Outcome of one generation task."""

    task: str
    package: str
    source_directory: Path
    output_directory: Path
    buckets: list[str] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"Created enum class(es) for files in directory \"{self.source_directory}\":\n"
            + ",\n".join(f"  {name}" for name in self.buckets)
            + f"\nin package {self.package} in \"{self.output_directory}\"."
        )

    def to_dict(self) -> dict:
        return {
            "task": self.task,
            "package": self.package,
            "source_directory": str(self.source_directory),
            "output_directory": str(self.output_directory),
            "buckets": self.buckets,
            "files": [f.path for f in self.files],
            "warnings": self.warnings,
        }


def run_task(
    extractor: KeyExtractor,
    task: TaskConfig,
    generated_source_directory: Path,
) -> GenerationResult:
    """Generate enum modules for one task.

    Args:
        extractor: Format-specific key extractor.
        task: Resolved task parameters.
        generated_source_directory: Root that package directories are
            created under.

    Returns:
        GenerationResult describing the written files.

    Raises:
        ConfigurationError: If the target package or source directory is unset.
        DirectoryNotFoundError: If the source directory does not exist.
        FileReadError: If a matched file cannot be read.
        EmptyNameError: If a bucket name cannot be sanitized.
    """
    if not task.target_package:
        raise ConfigurationError(
            f"Cannot run {extractor.name}: target_package is not set. "
            "Set it in enumgen.yml or pass --package."
        )
    if not task.src_directory:
        raise ConfigurationError(
            f"Cannot run {extractor.name}: no source directory configured "
            "and none of the default asset directories exist."
        )

    with task_context(extractor.name):
        return _run(extractor, task, generated_source_directory)


def _run(
    extractor: KeyExtractor,
    task: TaskConfig,
    generated_source_directory: Path,
) -> GenerationResult:
    package = task.target_package
    src_dir = Path(task.src_directory)

    # ── Scan + extract ──────────────────────────────────────────
    files = scan(src_dir, task.include_sub_directories, extractor.is_eligible)
    buckets = group(files, task.enum_class_name, extractor)

    # ── Sanitize + emit ─────────────────────────────────────────
    result = GenerationResult(
        task=extractor.name,
        package=package,
        source_directory=src_dir,
        output_directory=generated_source_directory.joinpath(*package.split(".")),
    )
    for bucket in buckets:
        artifact, warnings = build_artifact(package, bucket.name, bucket.keys, extractor.decorator)
        result.warnings.extend(warnings)
        result.files.append(generate_enum_module(
            artifact,
            reason=f"{extractor.name}: {len(artifact.identifiers)} member(s) "
            f"from {len(bucket.files)} file(s) in {src_dir}",
        ))
        result.buckets.append(bucket.name)

    # ── Write ───────────────────────────────────────────────────
    result.output_directory.mkdir(parents=True, exist_ok=True)
    write_files(result.files, generated_source_directory)

    logger.info(result.summary())
    return result


def write_files(files: list[GeneratedFile], root: Path) -> list[GeneratedFile]:
    """Write *files* under *root*.

    An existing file is replaced only when its ``overwrite`` flag is set.

    Returns:
        The files that were actually written.
    """
    written: list[GeneratedFile] = []
    for generated in files:
        target = root / generated.path
        if target.exists() and not generated.overwrite:
            logger.info("Kept existing %s", target)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        logger.debug("Wrote %s", target)
        written.append(generated)
    return written


def run_configured_task(
    config: ToolsConfig,
    task_name: str,
    extractor: KeyExtractor | None = None,
) -> GenerationResult:
    """Run a task by name using its parameters from *config*."""
    task = config.task(task_name)
    if task is None:
        raise ConfigurationError(f"Unknown task '{task_name}'")
    return run_task(
        extractor or get_extractor(task_name),
        task,
        Path(config.generated_source_directory),
    )


def create_bundle_lines(config: ToolsConfig) -> GenerationResult:
    """Generate bundle-line enums from .properties files."""
    return run_configured_task(config, BUNDLE_LINES_TASK)


def create_asset_enums(config: ToolsConfig) -> GenerationResult:
    """Generate region enums from .atlas files."""
    return run_configured_task(config, ASSET_ENUMS_TASK)
