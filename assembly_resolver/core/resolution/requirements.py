"""Fold assembly directives into a ResolutionManagementInfo.

One entry point per directive kind. Each expands declared scopes through
the scope implication table and merges the result into the caller's
accumulator. A directive with an invalid scope raises before touching the
accumulator.
"""

import logging
from typing import Optional

from ...model import Assembly, BuildContext, DependencySet, ModuleSet, Project
from ..reactor import ModuleSelection, ReactorTree
from ..scope import ScopeFilter
from .info import ResolutionManagementInfo

logger = logging.getLogger(__name__)


def update_dependency_set_requirements(
    dependency_set: DependencySet,
    info: ResolutionManagementInfo,
    project: Optional[Project] = None,
    assembly_id: Optional[str] = None,
) -> None:
    """Merge a dependency-set's requirements into ``info``.

    A dependency-set always requires resolution. Its declared scope is
    expanded and merged, and its transitivity is merged (sticky-true).

    Parameters
    ----------
    dependency_set : DependencySet
        The directive
    info : ResolutionManagementInfo
        Accumulator of the current pass
    project : Project, optional
        Project the set applies to; defaults to the accumulator's project
    assembly_id : str, optional
        Assembly id used in log messages

    Raises
    ------
    ConfigurationError
        If the declared scope is not recognized
    """
    scope_filter = ScopeFilter.for_declared_scope(dependency_set.scope)
    project = project or info.project

    info.set_resolution_required()
    info.set_resolved_transitively(dependency_set.use_transitive_dependencies)
    info.merge_scope_filter(scope_filter)

    logger.debug(
        "[%s] dependency-set for %s: scope=%s transitive=%s -> %s",
        assembly_id or "-",
        project,
        dependency_set.scope,
        dependency_set.use_transitive_dependencies,
        sorted(s.value for s in scope_filter.included),
    )


def update_module_set_requirements(
    module_set: ModuleSet,
    dependency_set: Optional[DependencySet],
    info: ResolutionManagementInfo,
    context: BuildContext,
    assembly_id: Optional[str] = None,
    tree: Optional[ReactorTree] = None,
) -> None:
    """Merge a module-set and one of its nested dependency-sets into ``info``.

    Modules below the context's project that match the module-set are
    enabled. The nested dependency-set, when given, is then applied exactly
    like a top-level one; its scopes are merged even when no module matched.
    Without a nested dependency-set the module-set does not require
    resolution.

    Parameters
    ----------
    module_set : ModuleSet
        The directive
    dependency_set : DependencySet, optional
        One dependency-set from the module-set's binaries section
    info : ResolutionManagementInfo
        Accumulator of the current pass
    context : BuildContext
        Root project and reactor
    assembly_id : str, optional
        Assembly id used in log messages
    tree : ReactorTree, optional
        Pre-built reactor tree; built from ``context`` when omitted

    Raises
    ------
    ConfigurationError
        If a pattern or the nested scope is invalid, or the context's
        project is not in the reactor
    """
    # fail before enabling anything
    if dependency_set is not None:
        ScopeFilter.for_declared_scope(dependency_set.scope)

    tree = tree or ReactorTree(context.reactor_projects)
    selection = ModuleSelection.from_module_set(module_set)
    selected = selection.select(tree, context.project)

    logger.debug(
        "[%s] module-set %s (sub-modules=%s) selected %d project(s): %s",
        assembly_id or "-",
        module_set.includes or ["*"],
        module_set.include_sub_modules,
        len(selected),
        [str(p) for p in selected],
    )
    info.enable_projects(selected)

    if dependency_set is not None:
        update_dependency_set_requirements(
            dependency_set, info, context.project, assembly_id=assembly_id
        )


def update_repository_requirements(
    assembly: Assembly, info: ResolutionManagementInfo
) -> None:
    """Merge the scopes of the assembly's repository entries into ``info``.

    Resolution is required as soon as one entry exists. Repository entries
    never enable projects or change transitivity.

    Raises
    ------
    ConfigurationError
        If any entry's scope is not recognized
    """
    repositories = assembly.repositories
    if not repositories:
        return

    combined = ScopeFilter()
    for entry in repositories:
        combined.update(ScopeFilter.for_declared_scope(entry.scope))

    info.set_resolution_required()
    info.merge_scope_filter(combined)

    logger.debug(
        "[%s] %d repository entr%s -> %s",
        assembly.id,
        len(repositories),
        "y" if len(repositories) == 1 else "ies",
        sorted(s.value for s in combined.included),
    )
