"""
Generated file model — returned by every generator.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator, not yet written to disk.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether to replace the file if it already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
