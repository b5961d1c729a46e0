"""Orchestration of a full resolution pass for one assembly."""

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ContextManager, Dict, List, Optional, Set

from ...exceptions import DependencyResolutionError
from ...io.logging import PassLog, log_yaml
from ...model import Artifact, Assembly, BuildContext, DependencySet, RemoteRepository
from ..reactor import ReactorTree
from .config import ResolverConfig
from .executor import ResolutionExecutor
from .info import ResolutionManagementInfo
from .repositories import aggregate_remote_repositories
from .requirements import (
    update_dependency_set_requirements,
    update_module_set_requirements,
    update_repository_requirements,
)
from .validator import check_assembly


@dataclass
class ResolutionResult:
    """Outcome of resolving everything an assembly asks for."""

    info: ResolutionManagementInfo
    repositories: List[RemoteRepository] = field(default_factory=list)
    artifacts: Set[Artifact] = field(default_factory=set)

    @property
    def resolved(self) -> bool:
        """False when no directive required resolution and nothing was fetched."""
        return self.info.is_resolution_required()


@dataclass
class DependencySetResolution:
    """Artifacts resolved for a single top-level dependency-set."""

    dependency_set: DependencySet
    artifacts: Set[Artifact] = field(default_factory=set)


class DependencyResolver:
    """Plans and runs dependency resolution for assemblies.

    Gathers requirements from every directive into one accumulator,
    aggregates remote repositories over the enabled projects and hands both
    to the executor, so each assembly is resolved in a single pass.

    With ``config.log_path`` set, every pass run through this resolver is
    also written to its own log file (see ``log_file``).

    Parameters
    ----------
    executor : ResolutionExecutor
        Performs the actual artifact resolution
    config : ResolverConfig, optional
        Resolver configuration

    Example
    -------
    >>> resolver = DependencyResolver(InMemoryExecutor())
    >>> result = resolver.resolve_dependencies(assembly, context)
    >>> sorted(str(a.coordinate) for a in result.artifacts)
    """

    def __init__(
        self,
        executor: ResolutionExecutor,
        config: Optional[ResolverConfig] = None,
    ):
        self.executor = executor
        self.config = config or ResolverConfig()
        self.logger = logging.getLogger(__name__)
        self.pass_log: Optional[PassLog] = None
        if self.config.log_path:
            self.pass_log = PassLog(
                self.config.log_path,
                level=self.config.level,
                timestamped=self.config.timestamped_log,
            )

    @property
    def log_file(self) -> Optional[Path]:
        return self.pass_log.path if self.pass_log else None

    def close(self) -> None:
        """Close the log file, if any."""
        if self.pass_log is not None:
            self.pass_log.close()

    def build_requirements(
        self, assembly: Assembly, context: BuildContext
    ) -> ResolutionManagementInfo:
        """Gather the requirements of every directive in ``assembly``.

        Raises
        ------
        ConfigurationError
            If validation is enabled and the assembly is invalid, or a
            directive fails while being processed
        """
        with self._capture():
            if self.config.validate_assembly:
                check_assembly(assembly)

            info = ResolutionManagementInfo(context.project)

            for dependency_set in assembly.dependency_sets:
                update_dependency_set_requirements(
                    dependency_set, info, context.project, assembly_id=assembly.id
                )

            if assembly.module_sets:
                tree = ReactorTree(context.reactor_projects)
                for module_set in assembly.module_sets:
                    nested = module_set.dependency_sets
                    if not nested:
                        update_module_set_requirements(
                            module_set, None, info, context, assembly.id, tree=tree
                        )
                    for dependency_set in nested:
                        update_module_set_requirements(
                            module_set, dependency_set, info, context, assembly.id, tree=tree
                        )

            update_repository_requirements(assembly, info)
            return info

    def resolve_dependencies(
        self, assembly: Assembly, context: BuildContext
    ) -> ResolutionResult:
        """Resolve everything ``assembly`` needs in a single pass.

        The executor is not called at all when no directive requires
        resolution.

        Raises
        ------
        ConfigurationError
            If the assembly is invalid
        DependencyResolutionError
            If the executor fails
        """
        with self._capture():
            info = self.build_requirements(assembly, context)
            self._log_summary(assembly.id, info)

            if not info.is_resolution_required():
                self.logger.info("Assembly '%s' requires no dependency resolution", assembly.id)
                return ResolutionResult(info=info)

            repositories, artifacts = self._execute(assembly.id, info, context)
            self.logger.info(
                "Assembly '%s': resolved %d artifact(s) for %d project(s)",
                assembly.id,
                len(artifacts),
                len(info.enabled_projects),
            )
            return ResolutionResult(info=info, repositories=repositories, artifacts=artifacts)

    def resolve_dependency_sets(
        self, assembly: Assembly, context: BuildContext
    ) -> List[DependencySetResolution]:
        """Resolve each top-level dependency-set on its own.

        Every set gets a fresh accumulator. When the set uses the project
        artifact, the root project's own artifact is added to its result.
        """
        with self._capture():
            if self.config.validate_assembly:
                check_assembly(assembly)

            results = []
            for dependency_set in assembly.dependency_sets:
                info = ResolutionManagementInfo(context.project)
                update_dependency_set_requirements(
                    dependency_set, info, context.project, assembly_id=assembly.id
                )
                repositories = aggregate_remote_repositories(
                    context.remote_repositories, [context.project]
                )
                artifacts = set(self._call_executor(context.project, info, repositories))
                if dependency_set.use_project_artifact and context.project.artifact is not None:
                    artifacts.add(context.project.artifact)
                results.append(DependencySetResolution(dependency_set, artifacts))
            return results

    def _capture(self) -> ContextManager[Any]:
        if self.pass_log is None:
            return nullcontext()
        return self.pass_log.capture()

    def _execute(
        self,
        assembly_id: str,
        info: ResolutionManagementInfo,
        context: BuildContext,
    ):
        if self.config.resolve_enabled_projects:
            projects = info.enabled_projects
        else:
            projects = [context.project]

        repositories = aggregate_remote_repositories(context.remote_repositories, projects)
        self.logger.debug(
            "[%s] using %d remote repositories: %s",
            assembly_id,
            len(repositories),
            [r.id for r in repositories],
        )

        artifacts: Set[Artifact] = set()
        for project in projects:
            artifacts |= self._call_executor(project, info, repositories)
        return repositories, artifacts

    def _call_executor(self, project, info, repositories) -> Set[Artifact]:
        try:
            return self.executor.resolve(project, info, repositories)
        except DependencyResolutionError as e:
            self.logger.error("Dependency resolution failed for %s: %s", project, e)
            raise

    def _log_summary(self, assembly_id: str, info: ResolutionManagementInfo) -> None:
        if not self.config.log_summary:
            return
        record: Dict[str, Any] = {"assembly": assembly_id}
        record.update(info.to_dict())
        log_yaml(None, record, logger=self.logger)
