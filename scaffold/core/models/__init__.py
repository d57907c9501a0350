"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from scaffold.core.models import Project, BoilerplateConfig, GeneratedFile
"""

from scaffold.core.models.boilerplate import BoilerplateConfig
from scaffold.core.models.project import BoilerplateSettings, Project
from scaffold.core.models.template import GeneratedFile

__all__ = [
    # boilerplate.py
    "BoilerplateConfig",
    # project.py
    "BoilerplateSettings",
    # template.py
    "GeneratedFile",
    "Project",
]
