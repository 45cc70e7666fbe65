"""
enumgen: CLI entrypoint.

Usage:
    enumgen --help
    enumgen create-bundle-lines --package com.example.i18n
    enumgen create-asset-enums
    enumgen generate
    enumgen config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from enumgen import __version__
from enumgen.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="enumgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to enumgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """enumgen: generate Python enums from asset and resource files."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("ENUMGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("ENUMGEN_LOG_FILE"),
        log_file_level=os.environ.get("ENUMGEN_LOG_FILE_LEVEL"),
    )


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate enumgen.yml configuration."""
    from enumgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Config: {result.config_path}")
        click.echo(f"   Output: {result.config.generated_source_directory}")
        click.echo(f"   Runnable tasks: {', '.join(result.runnable) or 'none'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Task commands ───────────────────────────────────────────────

from enumgen.ui.cli.tasks import create_asset_enums, create_bundle_lines, generate

cli.add_command(create_bundle_lines)
cli.add_command(create_asset_enums)
cli.add_command(generate)


if __name__ == "__main__":
    cli()
