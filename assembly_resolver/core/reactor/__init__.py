"""Reactor topology and module-set selection."""

from .selection import ModuleSelection, matches_pattern, pattern_error
from .tree import ModuleNode, ReactorTree

__all__ = [
    "ReactorTree",
    "ModuleNode",
    "ModuleSelection",
    "matches_pattern",
    "pattern_error",
]
