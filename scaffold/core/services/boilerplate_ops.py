"""Boilerplate service — build settings, generate and write the header file."""

from __future__ import annotations

import logging
from pathlib import Path

from scaffold.core.config.loader import ConfigError
from scaffold.core.models.boilerplate import BoilerplateConfig
from scaffold.core.models.project import BoilerplateSettings

logger = logging.getLogger(__name__)


def _read_text(project_root: Path, rel_path: str, what: str) -> str:
    path = project_root / rel_path
    if not path.is_file():
        raise ConfigError(f"{what} not found: {rel_path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {what} {rel_path}: {e}") from e


def build_config(
    project_root: Path,
    settings: BoilerplateSettings | None = None,
    *,
    license: str = "",
    owner: str = "",
    year: str = "",
    path: str = "",
    extension: str = "",
    license_files: dict[str, str] | None = None,
    boilerplate_file: str = "",
) -> BoilerplateConfig:
    """Merge project.yml settings with command-line overrides.

    Non-empty overrides win over settings. License files and the
    explicit boilerplate file are read relative to ``project_root``.

    Raises:
        ConfigError: a referenced file is missing or unreadable.
    """
    settings = settings or BoilerplateSettings()

    licenses = dict(settings.licenses)
    files = {**settings.license_files, **(license_files or {})}
    for key, rel_path in files.items():
        licenses[key] = _read_text(project_root, rel_path, f"License file for '{key}'")

    body = ""
    body_file = boilerplate_file or settings.boilerplate_file
    if body_file:
        body = _read_text(project_root, body_file, "Boilerplate file")
        logger.debug("Using explicit boilerplate from %s", body_file)

    return BoilerplateConfig(
        license=license or settings.license,
        licenses=licenses or None,
        owner=owner or settings.owner,
        year=year or settings.year,
        path=path or settings.path,
        extension=extension or settings.extension,
        boilerplate=body,
    )


def generate_boilerplate(
    project_root: Path,
    config: BoilerplateConfig,
    overwrite: bool = False,
) -> dict:
    """Generate the boilerplate header file.

    Returns:
        {"ok": True, "file": {...}} or
        {"error": "...", "license": "...", "supported": [...]}
    """
    from scaffold.core.services.generators.boilerplate import (
        UnknownLicenseError,
        generate_boilerplate as _gen,
        supported_licenses,
    )

    try:
        result = _gen(project_root, config, overwrite=overwrite)
    except UnknownLicenseError as e:
        logger.info("Unknown license requested: %s", e.license)
        supported = sorted(set(supported_licenses()) | set(config.licenses or {}))
        return {
            "error": f"Unknown license '{e.license}'",
            "license": e.license,
            "supported": supported,
        }

    logger.info("Generated %s", result.path)
    return {"ok": True, "file": result.model_dump()}


def list_licenses(config: BoilerplateConfig | None = None) -> dict:
    """Describe the license keys a generate call could use.

    Returns:
        {"licenses": [{"key", "builtin", "lines"}, ...], "default": "apache2"}
    """
    from scaffold.core.services.generators.boilerplate import (
        DEFAULT_LICENSE,
        KNOWN_LICENSES,
        merged_licenses,
    )

    table = merged_licenses(config or BoilerplateConfig())
    items = [
        {
            "key": key,
            "builtin": key in KNOWN_LICENSES,
            "lines": len(body.strip().splitlines()),
        }
        for key, body in sorted(table.items())
    ]
    return {"licenses": items, "default": DEFAULT_LICENSE}


def write_generated_file(project_root: Path, file_data: dict) -> dict:
    """Write a GeneratedFile to disk.

    Args:
        project_root: Project root directory.
        file_data: Dict with 'path', 'content', 'overwrite'.

    Returns:
        {"ok": True, "path": "...", "written": True, "replaced": bool}
        or {"error": "..."}
    """
    rel_path = file_data.get("path", "")
    content = file_data.get("content", "")
    overwrite = file_data.get("overwrite", False)

    if not rel_path or not content:
        return {"error": "Missing path or content"}

    target = project_root / rel_path

    if target.exists() and not overwrite:
        return {
            "error": f"File already exists: {rel_path} (use --overwrite to replace)",
            "path": rel_path,
            "written": False,
        }

    replaced = target.exists()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        return {"error": f"Cannot write {rel_path}: {e}", "path": rel_path, "written": False}

    logger.info("Wrote generated file: %s", target)
    return {"ok": True, "path": rel_path, "written": True, "replaced": replaced}
