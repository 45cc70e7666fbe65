"""
CLI commands for the generation tasks.

Thin wrappers over ``enumgen.core.use_cases.generate``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _load_config(ctx: click.Context):
    """Load enumgen.yml from --config or by searching upward.

    Without a config file, defaults are resolved against the CWD so the
    task options alone are enough to run.
    """
    from enumgen.core.config.loader import find_config_file, load_config, resolve_config
    from enumgen.core.models.config import ToolsConfig

    config_path: Path | None = ctx.obj.get("config_path") or find_config_file()
    if config_path is not None:
        return load_config(config_path)
    return resolve_config(ToolsConfig(), Path.cwd())


def _print_result(ctx: click.Context, result) -> None:
    if ctx.obj.get("quiet"):
        return
    click.secho(
        f"✅ {result.task}: {len(result.buckets)} enum(s) in package {result.package}",
        fg="green",
        bold=True,
    )
    click.echo(f"   Source: {result.source_directory}")
    click.echo(f"   Output: {result.output_directory}")
    for name in result.buckets:
        click.echo(f"     • {name}")
    if result.warnings:
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")
    click.echo()


def _run(
    ctx: click.Context,
    task_name: str,
    package: str | None,
    src: str | None,
    class_name: str | None,
    recursive: bool | None,
    out: str | None,
    as_json: bool,
) -> None:
    from enumgen.core.errors import EnumGenError
    from enumgen.core.use_cases.generate import run_configured_task

    try:
        config = _load_config(ctx)
        task = config.task(task_name)
        overrides = {
            "target_package": package,
            "src_directory": str(Path(src).resolve()) if src else None,
            "enum_class_name": class_name,
            "include_sub_directories": recursive,
        }
        task = task.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        update = {"create_bundle_lines" if task_name == "bundle-lines" else "create_asset_enums": task}
        if out:
            update["generated_source_directory"] = str(Path(out).resolve())
        config = config.model_copy(update=update)

        result = run_configured_task(config, task_name)
    except EnumGenError as e:
        if as_json:
            click.echo(json.dumps({"task": task_name, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    _print_result(ctx, result)


def _task_options(func):
    """Options shared by the per-task commands."""
    options = [
        click.option("--package", "-p", default=None, help="Target package of the generated enums."),
        click.option("--src", "-s", default=None, help="Directory searched for input files."),
        click.option("--class-name", default=None, help="Single enum name covering all files."),
        click.option(
            "--recursive/--no-recursive",
            default=None,
            help="Search sub-directories (default: from config, else yes).",
        ),
        click.option("--out", "-o", default=None, help="Generated-source root directory."),
        click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("create-bundle-lines")
@_task_options
@click.pass_context
def create_bundle_lines(ctx: click.Context, package, src, class_name, recursive, out, as_json) -> None:
    """Generate bundle-line enums from .properties files."""
    _run(ctx, "bundle-lines", package, src, class_name, recursive, out, as_json)


@click.command("create-asset-enums")
@_task_options
@click.pass_context
def create_asset_enums(ctx: click.Context, package, src, class_name, recursive, out, as_json) -> None:
    """Generate texture-region enums from .atlas files."""
    _run(ctx, "asset-enums", package, src, class_name, recursive, out, as_json)


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool) -> None:
    """Run every task that has a target package configured."""
    from enumgen.core.errors import EnumGenError
    from enumgen.core.use_cases.generate import ASSET_ENUMS_TASK, BUNDLE_LINES_TASK, run_configured_task

    results = []
    try:
        config = _load_config(ctx)
        for task_name in (BUNDLE_LINES_TASK, ASSET_ENUMS_TASK):
            if not config.task(task_name).target_package:
                continue
            results.append(run_configured_task(config, task_name))
    except EnumGenError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
        return

    if not results:
        click.secho("No task has a target_package configured. Nothing generated.", fg="yellow")
        return
    for result in results:
        _print_result(ctx, result)
