"""Project and assembly models.

- project.py: coordinates, artifacts, remote repositories, projects
- assembly.py: dependency-sets, module-sets, repository entries, assemblies
- context.py: the build context (root project, reactor, external repositories)
"""

from .assembly import (
    Assembly,
    DependencySet,
    ModuleBinaries,
    ModuleSet,
    RepositoryEntry,
)
from .context import BuildContext
from .project import (
    Artifact,
    Project,
    ProjectCoordinate,
    RemoteRepository,
    normalize_url,
)

__all__ = [
    # Project
    "ProjectCoordinate",
    "Artifact",
    "RemoteRepository",
    "Project",
    "normalize_url",
    # Assembly
    "DependencySet",
    "ModuleBinaries",
    "ModuleSet",
    "RepositoryEntry",
    "Assembly",
    # Context
    "BuildContext",
]
