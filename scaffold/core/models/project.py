"""
Project model — the scaffold settings loaded from project.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class BoilerplateSettings(BaseModel):
    """The ``boilerplate:`` section of project.yml.

    Mirrors the ``generate`` command's options. File references are
    relative to the project root and are only read when generating.
    """

    license: str = ""
    owner: str = ""
    year: str = ""
    path: str = ""
    extension: str = "go"
    licenses: dict[str, str] = Field(default_factory=dict)
    license_files: dict[str, str] = Field(default_factory=dict)
    boilerplate_file: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def custom_keys(self) -> list[str]:
        """All custom license keys, inline and file-backed."""
        return sorted(set(self.licenses) | set(self.license_files))


class Project(BaseModel):
    """Root project identity — loaded from project.yml."""

    version: int = 1

    name: str
    description: str = ""
    repository: str = ""

    boilerplate: BoilerplateSettings = Field(default_factory=BoilerplateSettings)
