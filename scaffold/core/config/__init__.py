"""Project configuration (project.yml)."""
