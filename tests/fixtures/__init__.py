"""Test fixtures for assembly-resolver.

Provides project and reactor builders.
"""

from .reactor import (
    create_artifact,
    create_project,
    create_reactor,
)

__all__ = [
    "create_artifact",
    "create_project",
    "create_reactor",
]
