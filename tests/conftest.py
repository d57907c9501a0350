"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An isolated working directory with no project.yml above it."""
    root = tmp_path / "work"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def project_yml(project_dir: Path) -> Path:
    """A project.yml declaring a custom license and owner."""
    (project_dir / "LICENSES").mkdir()
    (project_dir / "LICENSES" / "mit.txt").write_text("\nSPDX-License-Identifier: MIT\n")
    content = textwrap.dedent("""\
        name: demo
        boilerplate:
          license: mit
          owner: The Demo Authors
          year: 2022
          license_files:
            mit: LICENSES/mit.txt
    """)
    path = project_dir / "project.yml"
    path.write_text(content)
    return path
