"""Resolution executors consuming a finished ResolutionManagementInfo."""

import logging
from abc import ABC, abstractmethod
from typing import List, Set

from ...exceptions import DependencyResolutionError
from ...model import Artifact, Project, RemoteRepository
from .info import ResolutionManagementInfo

logger = logging.getLogger(__name__)


class ResolutionExecutor(ABC):
    """Fetches the artifacts a finished requirement set asks for.

    Implementations own all network and filesystem access and report
    failures as DependencyResolutionError.
    """

    @abstractmethod
    def resolve(
        self,
        project: Project,
        info: ResolutionManagementInfo,
        repositories: List[RemoteRepository],
    ) -> Set[Artifact]:
        """Resolve ``project``'s dependencies under ``info``'s requirements."""
        ...


class InMemoryExecutor(ResolutionExecutor):
    """Executor over already-loaded project models.

    Returns the project's declared artifacts that pass the scope filter:
    direct dependencies only, unless transitive resolution was requested.

    Parameters
    ----------
    require_files : bool
        If True, an artifact without a local file is a resolution failure

    Example
    -------
    >>> executor = InMemoryExecutor()
    >>> artifacts = executor.resolve(project, info, [])
    """

    def __init__(self, require_files: bool = False):
        self.require_files = require_files

    def resolve(
        self,
        project: Project,
        info: ResolutionManagementInfo,
        repositories: List[RemoteRepository],
    ) -> Set[Artifact]:
        scope_filter = info.scope_filter

        if info.is_resolved_transitively():
            candidates = project.artifacts
        else:
            candidates = project.dependency_artifacts()

        resolved = {a for a in candidates if scope_filter.is_included(a.scope)}

        if self.require_files:
            missing = sorted(str(a.coordinate) for a in resolved if a.file is None)
            if missing:
                raise DependencyResolutionError(
                    f"Failed to resolve {len(missing)} artifact(s) for {project} "
                    f"from {len(repositories)} repositories: {', '.join(missing)}",
                    project=str(project),
                )

        logger.debug("Resolved %d artifact(s) for %s", len(resolved), project)
        return resolved
