"""
Boilerplate model — inputs for one rendering of the header file.

A ``BoilerplateConfig`` is built fresh for every generate call, run
through ``validate → apply_defaults → render`` and then discarded.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class BoilerplateConfig(BaseModel):
    """Everything needed to render ``hack/boilerplate.<ext>.txt``.

    Empty strings mean "not set"; ``apply_defaults()`` fills them in.
    """

    license: str = ""                      # key into the license table
    licenses: dict[str, str] | None = None  # caller-supplied key → body
    owner: str = ""                        # copyright holder, optional
    year: str = ""                         # defaults to the current year
    boilerplate: str = ""                  # explicit body, skips rendering
    path: str = ""                         # output path, relative
    extension: str = "go"                  # used by the default path
    template_body: str = ""                # render source, set by defaults

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value: object) -> object:
        # YAML reads `year: 2024` as an int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
