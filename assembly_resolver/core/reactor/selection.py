"""Coordinate pattern matching and module-set project selection."""

import logging
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from typing import List, Optional

from ...exceptions import ConfigurationError
from ...model import ModuleSet, Project, ProjectCoordinate
from .tree import ReactorTree

logger = logging.getLogger(__name__)

MAX_PATTERN_SEGMENTS = 3


def pattern_error(pattern: str) -> Optional[str]:
    """Return a description of what is wrong with ``pattern``, or None."""
    if not isinstance(pattern, str) or not pattern.strip():
        return "Empty coordinate pattern"
    segments = pattern.strip().split(":")
    if len(segments) > MAX_PATTERN_SEGMENTS:
        return f"Coordinate pattern '{pattern}' has more than {MAX_PATTERN_SEGMENTS} segments"
    if any(not s for s in segments):
        return f"Coordinate pattern '{pattern}' has an empty segment"
    return None


def matches_pattern(pattern: str, coordinate: ProjectCoordinate) -> bool:
    """Check ``coordinate`` against a ``group[:name[:version]]`` pattern.

    Segments accept ``*`` and ``?`` wildcards; omitted trailing segments
    match anything. A pattern without ``:`` is tried against the full
    ``group:name:version`` string and against the bare name.

    Raises
    ------
    ConfigurationError
        If the pattern is malformed
    """
    error = pattern_error(pattern)
    if error:
        raise ConfigurationError(error)

    pattern = pattern.strip()
    if ":" not in pattern:
        return fnmatchcase(str(coordinate), pattern) or fnmatchcase(coordinate.name, pattern)

    values = (coordinate.group, coordinate.name, coordinate.version)
    return all(fnmatchcase(value, seg) for value, seg in zip(values, pattern.split(":")))


@dataclass
class ModuleSelection:
    """Include/exclude patterns plus the sub-module traversal switch."""

    includes: List[str] = field(default_factory=list)
    excludes: List[str] = field(default_factory=list)
    include_sub_modules: bool = True

    @classmethod
    def from_module_set(cls, module_set: ModuleSet) -> "ModuleSelection":
        return cls(
            includes=list(module_set.includes),
            excludes=list(module_set.excludes),
            include_sub_modules=module_set.include_sub_modules,
        )

    def matches(self, project: Project) -> bool:
        """Excludes win; an empty include list includes everything."""
        coordinate = project.coordinate
        if any(matches_pattern(p, coordinate) for p in self.excludes):
            return False
        if not self.includes:
            return True
        return any(matches_pattern(p, coordinate) for p in self.includes)

    def select(self, tree: ReactorTree, root: Project) -> List[Project]:
        """Pick the modules below ``root`` selected by this module-set.

        Without sub-module traversal a matched project is dropped when its
        nearest matched ancestor is another matched module rather than the
        root itself.

        Raises
        ------
        ConfigurationError
            If ``root`` is not part of the reactor, or a pattern is malformed
        """
        try:
            candidates = tree.descendants(root.coordinate)
        except KeyError:
            raise ConfigurationError(
                f"Project {root} is not part of the reactor"
            ) from None

        matched = [p for p in candidates if self.matches(p)]
        if self.include_sub_modules:
            return matched

        matched_coordinates = {p.coordinate for p in matched}
        selected = []
        for project in matched:
            nested = False
            for ancestor in tree.ancestors(project.coordinate):
                if ancestor == root.coordinate:
                    break
                if ancestor in matched_coordinates:
                    nested = True
                    break
            if nested:
                logger.debug("Skipping sub-module %s: sub-module traversal disabled", project)
                continue
            selected.append(project)
        return selected
