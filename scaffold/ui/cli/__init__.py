"""Click command groups, registered by ``scaffold.main``."""
