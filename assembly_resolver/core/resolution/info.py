"""Per-pass accumulator of resolution requirements."""

from typing import Any, Dict, Iterable, List

from ...model import Project, ProjectCoordinate
from ..scope import ScopeFilter


class ResolutionManagementInfo:
    """Requirements gathered from every directive of one resolution pass.

    Created once per top-level project before requirement gathering, mutated
    in place by each directive visited, read once by the resolution executor.
    All state only ever grows: the resolution and transitivity flags are
    sticky-true, the scope filter only widens and enabled projects are only
    added.

    Parameters
    ----------
    project : Project
        The root project, enabled from the start

    Example
    -------
    >>> info = ResolutionManagementInfo(project)
    >>> info.set_resolved_transitively(True)
    >>> info.set_resolved_transitively(False)
    >>> info.is_resolved_transitively()
    True
    """

    def __init__(self, project: Project):
        self.project = project
        self._resolution_required = False
        self._resolved_transitively = False
        self._scope_filter = ScopeFilter()
        self._enabled_projects: Dict[ProjectCoordinate, Project] = {project.coordinate: project}

    def set_resolution_required(self) -> None:
        self._resolution_required = True

    def is_resolution_required(self) -> bool:
        return self._resolution_required

    def set_resolved_transitively(self, transitive: bool) -> None:
        """Record a directive's transitivity; once true, stays true."""
        self._resolved_transitively = self._resolved_transitively or bool(transitive)

    def is_resolved_transitively(self) -> bool:
        return self._resolved_transitively

    def merge_scope_filter(self, scope_filter: ScopeFilter) -> None:
        self._scope_filter.update(scope_filter)

    @property
    def scope_filter(self) -> ScopeFilter:
        """Copy of the accumulated filter."""
        return ScopeFilter(
            included=set(self._scope_filter.included),
            excluded=set(self._scope_filter.excluded),
        )

    def enable_projects(self, projects: Iterable[Project]) -> None:
        for project in projects:
            self._enabled_projects.setdefault(project.coordinate, project)

    @property
    def enabled_projects(self) -> List[Project]:
        """Enabled projects in the order they were first enabled."""
        return list(self._enabled_projects.values())

    def is_enabled(self, project: Project) -> bool:
        return project.coordinate in self._enabled_projects

    def to_dict(self) -> Dict[str, Any]:
        """Summary for structured logging."""
        return {
            "project": str(self.project),
            "resolution_required": self._resolution_required,
            "resolved_transitively": self._resolved_transitively,
            "scope_filter": self._scope_filter.to_dict(),
            "enabled_projects": [str(p) for p in self._enabled_projects.values()],
        }
