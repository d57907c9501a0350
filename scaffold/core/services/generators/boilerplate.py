"""
Boilerplate generator — the copyright/license header for generated sources.

Produces ``hack/boilerplate.<ext>.txt``: a block comment holding a
copyright line and a license notice. Other generators prepend this file
to every source file they emit.

Pipeline, in order:

    validate_boilerplate(config)        # reject unknown license keys
    config = apply_defaults(config)     # fill path, license, year, table
    text = render_boilerplate(config)   # substitute into the template
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from types import MappingProxyType

from scaffold.core.models.boilerplate import BoilerplateConfig
from scaffold.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


# ── License table ───────────────────────────────────────────────


_APACHE2 = """
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

# Read-only: shared by every call, never mutated
KNOWN_LICENSES: MappingProxyType[str, str] = MappingProxyType({
    "apache2": _APACHE2,
    "none": "",
})

DEFAULT_LICENSE = "apache2"

DEFAULT_PATH_TEMPLATE = "hack/boilerplate.{extension}.txt"

BOILERPLATE_TEMPLATE = "/*\n{copyright}\n{license}*/"


class UnknownLicenseError(ValueError):
    """The requested license key is neither built in nor supplied."""

    def __init__(self, license: str):
        self.license = license
        super().__init__(f"unknown specified license {license}")


def supported_licenses() -> list[str]:
    """Built-in license keys, sorted."""
    return sorted(KNOWN_LICENSES)


def default_path(extension: str) -> str:
    """Default output path for a source-file extension."""
    return DEFAULT_PATH_TEMPLATE.format(extension=extension or "go")


# ── Pipeline ────────────────────────────────────────────────────


def validate_boilerplate(config: BoilerplateConfig) -> None:
    """Check that the license key can be resolved.

    An empty key passes: ``apply_defaults()`` picks the default later.

    Raises:
        UnknownLicenseError: key is set but matches neither a built-in
            nor an entry of ``config.licenses``.
    """
    key = config.license
    if not key:
        return
    if key in KNOWN_LICENSES:
        return
    if config.licenses and key in config.licenses:
        return
    raise UnknownLicenseError(key)


def apply_defaults(config: BoilerplateConfig) -> BoilerplateConfig:
    """Return a copy of ``config`` with every empty field filled in.

    Fields that are already set are left alone, so applying this twice
    gives the same result as applying it once. Built-in licenses are
    added to ``licenses`` only under keys the caller has not used.
    """
    licenses = dict(config.licenses or {})
    for key, body in KNOWN_LICENSES.items():
        licenses.setdefault(key, body)

    updates: dict[str, object] = {
        "path": config.path or default_path(config.extension),
        "license": config.license or DEFAULT_LICENSE,
        "licenses": licenses,
        "year": config.year or str(datetime.now().year),
    }

    if config.boilerplate:
        updates["template_body"] = config.boilerplate
    else:
        updates["template_body"] = config.template_body or BOILERPLATE_TEMPLATE

    return config.model_copy(update=updates)


def merged_licenses(config: BoilerplateConfig) -> dict[str, str]:
    """The table license keys are resolved against.

    Caller entries first, then every built-in; a custom entry can add a
    key but cannot replace the text of a built-in one.
    """
    table = dict(config.licenses or {})
    table.update(KNOWN_LICENSES)
    return table


def render_boilerplate(config: BoilerplateConfig) -> str:
    """Render the header text for a defaulted config.

    An explicit ``boilerplate`` is returned as-is.

    Raises:
        RuntimeError: the license key does not resolve, which means
            ``validate_boilerplate``/``apply_defaults`` were skipped.
    """
    if config.boilerplate:
        return config.boilerplate

    table = merged_licenses(config)
    if config.license not in table:
        raise RuntimeError(
            f"License '{config.license}' cannot be resolved; "
            "validate_boilerplate() and apply_defaults() must run before rendering"
        )

    if config.owner:
        copyright_line = f"Copyright {config.year} {config.owner}."
    else:
        copyright_line = f"Copyright {config.year}."

    template = config.template_body or BOILERPLATE_TEMPLATE
    return template.format(copyright=copyright_line, license=table[config.license])


# ── Generator entry point ───────────────────────────────────────


def generate_boilerplate(
    project_root: Path,
    config: BoilerplateConfig,
    overwrite: bool = False,
) -> GeneratedFile:
    """Run the whole pipeline and wrap the text as a ``GeneratedFile``.

    Args:
        project_root: Project root (unused but kept for consistency).
        config: Caller settings; not modified.
        overwrite: Whether the file may replace an existing one.

    Raises:
        UnknownLicenseError: see ``validate_boilerplate``.
    """
    validate_boilerplate(config)
    resolved = apply_defaults(config)
    content = render_boilerplate(resolved)

    if resolved.boilerplate:
        reason = "Boilerplate from explicit body"
    elif resolved.owner:
        reason = f"Boilerplate: {resolved.license} license, {resolved.year} {resolved.owner}"
    else:
        reason = f"Boilerplate: {resolved.license} license, {resolved.year}"

    logger.debug("Rendered %s (%d lines)", resolved.path, len(content.splitlines()))

    return GeneratedFile(
        path=resolved.path,
        content=content,
        overwrite=overwrite,
        reason=reason,
    )
