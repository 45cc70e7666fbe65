"""
Configuration loader: reads enumgen.yml into a resolved ToolsConfig.

Resolution happens here so the engine only ever sees absolute paths:

  - ``$projectDir`` in ``generated_source_directory`` is replaced by the
    directory holding the config file
  - relative ``src_directory`` values are resolved against that directory
  - an unset ``src_directory`` falls back to the first existing default
    asset directory
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from enumgen.core.errors import ConfigurationError
from enumgen.core.models.config import PROJECT_DIR_PLACEHOLDER, TaskConfig, ToolsConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "enumgen.yml"

# Searched in order when a task has no src_directory
DEFAULT_SRC_DIRECTORIES = (
    "android/assets/i18n",
    "android/assets/nls",
    "android/assets",
    "core/assets/i18n",
    "core/assets/nls",
    "core/assets",
)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for enumgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to enumgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def project_root(config_path: Path) -> Path:
    """Get the project root directory from a config file path."""
    return config_path.parent.resolve()


def load_config(path: Path) -> ToolsConfig:
    """Load, validate and resolve a config file.

    Args:
        path: Path to enumgen.yml.

    Returns:
        ToolsConfig with all paths resolved against the file's directory.

    Raises:
        ConfigurationError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}"
        )

    # The file may wrap everything under an "enumgen" key or be flat
    if "enumgen" in data:
        data = data["enumgen"] or {}

    try:
        config = ToolsConfig.model_validate(data)
    except Exception as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    return resolve_config(config, project_root(path))


def resolve_config(config: ToolsConfig, project_dir: Path) -> ToolsConfig:
    """Return a copy of *config* with every path made absolute."""
    generated = config.generated_source_directory.replace(
        PROJECT_DIR_PLACEHOLDER, str(project_dir)
    )
    return config.model_copy(update={
        "generated_source_directory": str(_absolute(generated, project_dir)),
        "create_bundle_lines": resolve_task(config.create_bundle_lines, project_dir),
        "create_asset_enums": resolve_task(config.create_asset_enums, project_dir),
    })


def resolve_task(task: TaskConfig, project_dir: Path) -> TaskConfig:
    """Resolve a task's source directory, applying the default candidates."""
    if task.src_directory:
        src = _absolute(task.src_directory, project_dir)
    else:
        src = default_src_directory(project_dir)
        if src is not None:
            logger.debug("Using default source directory %s", src)
    return task.model_copy(update={"src_directory": str(src) if src else None})


def default_src_directory(project_dir: Path) -> Path | None:
    """First existing directory of ``DEFAULT_SRC_DIRECTORIES``, or None."""
    for candidate in DEFAULT_SRC_DIRECTORIES:
        path = project_dir / candidate
        if path.is_dir():
            return path
    return None


def _absolute(path: str, project_dir: Path) -> Path:
    p = Path(path).expanduser()
    return p if p.is_absolute() else project_dir / p
