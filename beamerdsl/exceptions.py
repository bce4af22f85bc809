"""beamerdsl Exceptions

Custom exceptions for the beamer builder DSL.
"""

from __future__ import annotations

from pathlib import Path


class BeamerDslError(Exception):
    """Base exception for all beamerdsl errors."""

    pass


class OwnershipError(BeamerDslError):
    """Raised when a node that already has a parent is added elsewhere."""

    def __init__(self, node: object, parent: object):
        self.node = node
        self.parent = parent
        super().__init__(
            f"{type(node).__name__} is already attached to {type(parent).__name__}"
        )


class ConfigError(BeamerDslError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"Invalid config {path}: {message}")
