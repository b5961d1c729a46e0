"""assembly-resolver: dependency-resolution planning for assembly packaging.

This package decides, before any artifact is fetched, what an assembly
descriptor needs resolved:
- which dependency scopes, folded through the scope implication table
- whether resolution must follow transitive dependencies
- which sibling projects of a multi-module build are packaged
- which remote repositories to consult, de-duplicated in priority order

Example usage:
    >>> from assembly_resolver import DependencyResolver, InMemoryExecutor
    >>> from assembly_resolver.model import (
    ...     Assembly, BuildContext, DependencySet, Project, ProjectCoordinate
    ... )
    >>>
    >>> project = Project(ProjectCoordinate("org.example", "app", "1.0"))
    >>> assembly = Assembly(id="bin", dependency_sets=[DependencySet(scope="runtime")])
    >>> resolver = DependencyResolver(InMemoryExecutor())
    >>> result = resolver.resolve_dependencies(assembly, BuildContext(project))
    >>> result.resolved
    True
"""

__version__ = "0.1.0"

from .core.resolution import (
    DependencyResolver,
    InMemoryExecutor,
    ResolutionManagementInfo,
    ResolverConfig,
    aggregate_remote_repositories,
    update_dependency_set_requirements,
    update_module_set_requirements,
    update_repository_requirements,
)
from .core.scope import Scope, ScopeFilter
from .exceptions import AssemblyResolverError, ConfigurationError, DependencyResolutionError

__all__ = [
    "__version__",
    "Scope",
    "ScopeFilter",
    "ResolutionManagementInfo",
    "update_dependency_set_requirements",
    "update_module_set_requirements",
    "update_repository_requirements",
    "aggregate_remote_repositories",
    "DependencyResolver",
    "InMemoryExecutor",
    "ResolverConfig",
    "AssemblyResolverError",
    "ConfigurationError",
    "DependencyResolutionError",
]
