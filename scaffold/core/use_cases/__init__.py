"""Use cases — multi-step operations behind CLI commands."""
