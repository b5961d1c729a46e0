"""Reactor module tree keyed by project coordinate."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ...model import Project, ProjectCoordinate

logger = logging.getLogger(__name__)


@dataclass
class ModuleNode:
    """A project in the reactor's module hierarchy."""

    project: Project
    children: List["ModuleNode"] = field(default_factory=list)

    @property
    def coordinate(self) -> ProjectCoordinate:
        return self.project.coordinate


def _dir_key(path: Path) -> str:
    return os.path.normpath(str(path))


class ReactorTree:
    """Module hierarchy of a multi-module build.

    Parent/child edges come from module declarations: a project declaring
    module ``m`` is the parent of the reactor project whose base directory
    is ``base_dir / m``. Projects without a base directory are matched by
    name instead. The parent relation is kept in an explicit lookup map;
    nodes only own their children.
    """

    def __init__(self, projects: Iterable[Project]):
        self.coordinate_to_node: Dict[ProjectCoordinate, ModuleNode] = {}
        self.parent_of: Dict[ProjectCoordinate, ProjectCoordinate] = {}
        self._build_tree(list(projects))

    def _build_tree(self, projects: List[Project]) -> None:
        """Create a node per project, then link declared modules."""
        by_dir: Dict[str, Project] = {}
        by_name: Dict[str, Project] = {}
        for project in projects:
            if project.coordinate in self.coordinate_to_node:
                continue
            self.coordinate_to_node[project.coordinate] = ModuleNode(project)
            if project.base_dir is not None:
                by_dir.setdefault(_dir_key(project.base_dir), project)
            by_name.setdefault(project.name, project)

        for node in self.coordinate_to_node.values():
            parent = node.project
            for module in parent.modules:
                child = None
                if parent.base_dir is not None:
                    child = by_dir.get(_dir_key(parent.base_dir / module))
                if child is None:
                    child = by_name.get(Path(module).name)
                if child is None:
                    logger.debug("Module '%s' of %s is not in the reactor", module, parent)
                    continue
                if (
                    child.coordinate == parent.coordinate
                    or child.coordinate in self.parent_of
                    or child.coordinate in self.ancestors(parent.coordinate)
                ):
                    logger.warning(
                        "Ignoring module '%s' of %s: %s already has a place in the tree",
                        module,
                        parent,
                        child,
                    )
                    continue
                self.parent_of[child.coordinate] = parent.coordinate
                node.children.append(self.coordinate_to_node[child.coordinate])

    @property
    def roots(self) -> List[ModuleNode]:
        return [
            node
            for coordinate, node in self.coordinate_to_node.items()
            if coordinate not in self.parent_of
        ]

    def find_node(self, coordinate: ProjectCoordinate) -> ModuleNode:
        """Find node by coordinate. Raises KeyError if not found."""
        if coordinate not in self.coordinate_to_node:
            raise KeyError(f"Project not found in reactor: {coordinate}")
        return self.coordinate_to_node[coordinate]

    def parent(self, coordinate: ProjectCoordinate) -> Optional[ProjectCoordinate]:
        return self.parent_of.get(coordinate)

    def ancestors(self, coordinate: ProjectCoordinate) -> List[ProjectCoordinate]:
        """Return ancestors of ``coordinate``, nearest first."""
        result: List[ProjectCoordinate] = []
        current = self.parent_of.get(coordinate)
        while current is not None and current not in result:
            result.append(current)
            current = self.parent_of.get(current)
        return result

    def descendants(self, coordinate: ProjectCoordinate) -> List[Project]:
        """Return all projects below ``coordinate`` in declaration order."""
        result: List[Project] = []
        seen = {coordinate}
        stack = list(reversed(self.find_node(coordinate).children))
        while stack:
            node = stack.pop()
            if node.coordinate in seen:
                continue
            seen.add(node.coordinate)
            result.append(node.project)
            stack.extend(reversed(node.children))
        return result
