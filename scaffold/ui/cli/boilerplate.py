"""
CLI commands for the copyright/license boilerplate header.

Thin wrappers over ``scaffold.core.services.boilerplate_ops``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_project(ctx: click.Context):
    """Return (project_root, boilerplate settings or None).

    Without a project.yml the commands still work from options alone.
    """
    from scaffold.core.config.loader import ConfigError, find_project_file, load_project

    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        config_path = find_project_file()
    if config_path is None:
        return Path.cwd(), None

    try:
        project = load_project(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    return config_path.parent.resolve(), project.boilerplate


def _parse_license_files(values: tuple[str, ...]) -> dict[str, str]:
    files: dict[str, str] = {}
    for value in values:
        key, sep, path = value.partition("=")
        if not sep or not key or not path:
            raise click.BadParameter(
                f"expected KEY=PATH, got '{value}'", param_hint="--license-file"
            )
        files[key] = path
    return files


@click.group()
def boilerplate() -> None:
    """Copyright/license header — list licenses, generate the file."""


@boilerplate.command("licenses")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def licenses(ctx: click.Context, as_json: bool) -> None:
    """List license keys usable with --license."""
    from scaffold.core.config.loader import ConfigError
    from scaffold.core.services.boilerplate_ops import build_config, list_licenses

    project_root, settings = _resolve_project(ctx)
    try:
        config = build_config(project_root, settings)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    result = list_licenses(config)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.secho(f"📜 Licenses ({len(result['licenses'])}):", fg="cyan", bold=True)
    for item in result["licenses"]:
        kind = "built-in" if item["builtin"] else "custom"
        default = " (default)" if item["key"] == result["default"] else ""
        click.echo(f"   • {item['key']:<12} {kind}, {item['lines']} lines{default}")
    click.echo()


@boilerplate.command("generate")
@click.option("--license", "license_key", default="", help="License key (default: apache2).")
@click.option("--owner", default="", help="Copyright owner, e.g. 'The Example Authors'.")
@click.option("--year", default="", help="Copyright year (default: current year).")
@click.option("--path", "out_path", default="", help="Output path (default: hack/boilerplate.<ext>.txt).")
@click.option("--ext", "extension", default="", help="Source file extension for the default path.")
@click.option(
    "--license-file",
    "license_files",
    multiple=True,
    metavar="KEY=PATH",
    help="Add a custom license read from a file. Repeatable.",
)
@click.option(
    "--boilerplate-file",
    default="",
    help="Use this file's content verbatim instead of rendering.",
)
@click.option("--write", is_flag=True, help="Write to disk (default: preview only).")
@click.option("--overwrite", is_flag=True, help="Replace the file if it already exists.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    license_key: str,
    owner: str,
    year: str,
    out_path: str,
    extension: str,
    license_files: tuple[str, ...],
    boilerplate_file: str,
    write: bool,
    overwrite: bool,
    as_json: bool,
) -> None:
    """Generate the boilerplate header file.

    Examples:

        scaffold boilerplate generate --owner "The Example Authors"

        scaffold boilerplate generate --license none --year 2024 --write

        scaffold boilerplate generate --license mit --license-file mit=LICENSE.txt
    """
    from scaffold.core.config.loader import ConfigError
    from scaffold.core.services.boilerplate_ops import (
        build_config,
        generate_boilerplate,
        write_generated_file,
    )

    project_root, settings = _resolve_project(ctx)
    try:
        config = build_config(
            project_root,
            settings,
            license=license_key,
            owner=owner,
            year=year,
            path=out_path,
            extension=extension,
            license_files=_parse_license_files(license_files),
            boilerplate_file=boilerplate_file,
        )
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    result = generate_boilerplate(project_root, config, overwrite=overwrite)

    if "error" in result:
        if as_json:
            click.echo(json.dumps(result, indent=2))
        else:
            click.secho(f"❌ {result['error']}", fg="red")
            click.echo(f"   Supported: {', '.join(result['supported'])}")
        sys.exit(1)

    file_data = result["file"]

    if write:
        wr = write_generated_file(project_root, file_data)
        if as_json:
            click.echo(json.dumps({**result, "write": wr}, indent=2))
            sys.exit(1 if "error" in wr else 0)
        if "error" in wr:
            click.secho(f"❌ {wr['error']}", fg="red")
            sys.exit(1)
        click.secho(f"✅ Written: {wr['path']}", fg="green", bold=True)
        return

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.secho(f"📄 Preview: {file_data['path']}", fg="cyan", bold=True)
    click.echo(f"   Reason: {file_data['reason']}")
    click.echo("─" * 60)
    click.echo(file_data["content"])
    click.echo("─" * 60)
    click.secho("   (use --write to save to disk)", fg="yellow")
