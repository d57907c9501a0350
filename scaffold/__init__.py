"""Scaffold — project scaffolding CLI (copyright/license boilerplate)."""

__version__ = "0.1.0"
