"""
Config check use case: validate enumgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from enumgen.core.config.loader import find_config_file, load_config
from enumgen.core.errors import ConfigurationError
from enumgen.core.models.config import ToolsConfig

_TASKS = ("bundle-lines", "asset-enums")


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ToolsConfig | None = None
    config_path: Path | None = None
    runnable: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "generated_source_directory": (
                self.config.generated_source_directory if self.config else None
            ),
            "runnable_tasks": self.runnable,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the config file and report which tasks can run.

    Args:
        config_path: Optional explicit path to enumgen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.errors.append("No enumgen.yml found.")
        return result
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    for name in _TASKS:
        task = config.task(name)
        assert task is not None  # every name in _TASKS is a known task
        if not task.target_package:
            result.warnings.append(f"{name}: target_package is not set; task cannot run.")
            continue
        if not task.src_directory:
            result.warnings.append(
                f"{name}: no src_directory and no default asset directory exists."
            )
            continue
        if not Path(task.src_directory).is_dir():
            result.errors.append(f"{name}: source directory not found: {task.src_directory}")
            continue
        result.runnable.append(name)

    if not result.runnable and not result.errors:
        result.warnings.append("No task is fully configured. Nothing will be generated.")

    result.valid = len(result.errors) == 0
    return result
