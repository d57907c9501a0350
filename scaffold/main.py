"""
Scaffold — CLI entrypoint.

Usage:
    python -m scaffold.main --help
    python -m scaffold.main config check
    python -m scaffold.main boilerplate generate --owner "The Example Authors"
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from scaffold import __version__
from scaffold.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="scaffold")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to project.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Scaffold — generate project boilerplate."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("SCAFFOLD_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("SCAFFOLD_LOG_FILE"),
        log_file_level=os.environ.get("SCAFFOLD_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.group()
def config() -> None:
    """Project configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate project.yml configuration."""
    from scaffold.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.project is not None  # guaranteed when valid
        settings = result.project.boilerplate
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Project: {result.project.name}")
        click.echo(f"   License: {settings.license or 'apache2 (default)'}")
        if settings.owner:
            click.echo(f"   Owner:   {settings.owner}")
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


# ── Register sub-command groups from scaffold/ui/cli/ ─────────────

from scaffold.ui.cli.boilerplate import boilerplate

cli.add_command(boilerplate)


if __name__ == "__main__":
    cli()
