"""
Config check use case — validate project.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from scaffold.core.config.loader import ConfigError, find_project_file, load_project
from scaffold.core.models.project import Project


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    project: Project | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "project_name": self.project.name if self.project else None,
            "license": (self.project.boilerplate.license or None) if self.project else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate project configuration and report issues.

    Args:
        config_path: Optional explicit path to project.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    from scaffold.core.services.generators.boilerplate import KNOWN_LICENSES

    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_project_file()

    if config_path is None:
        result.errors.append("No project.yml found.")
        return result

    result.config_path = config_path

    try:
        project = load_project(config_path)
        result.project = project
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    settings = project.boilerplate
    project_root = config_path.parent

    # License key must resolve, same rule as generation
    custom = settings.custom_keys()
    if settings.license and settings.license not in KNOWN_LICENSES and settings.license not in custom:
        result.errors.append(
            f"Unknown license '{settings.license}'. "
            f"Known: {', '.join(sorted(set(KNOWN_LICENSES) | set(custom)))}"
        )

    # Referenced files must exist
    for key, rel_path in sorted(settings.license_files.items()):
        if not (project_root / rel_path).is_file():
            result.errors.append(f"License file for '{key}' not found: {rel_path}")

    if settings.boilerplate_file:
        if not (project_root / settings.boilerplate_file).is_file():
            result.errors.append(f"Boilerplate file not found: {settings.boilerplate_file}")
        elif settings.license or settings.owner:
            result.warnings.append(
                "boilerplate_file is set; license and owner are ignored."
            )

    shadowed = sorted(k for k in custom if k in KNOWN_LICENSES)
    if shadowed:
        result.warnings.append(
            f"Custom licenses shadow built-ins and will not be used: {', '.join(shadowed)}"
        )

    if settings.year and not (settings.year.isdigit() and len(settings.year) == 4):
        result.warnings.append(f"Year '{settings.year}' is not a 4-digit year.")

    result.valid = len(result.errors) == 0
    return result
