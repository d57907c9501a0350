"""
Generators — produce scaffold files from configuration.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``; writing it to disk is left to the service layer.
"""
