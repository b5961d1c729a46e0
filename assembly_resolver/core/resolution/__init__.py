"""Resolution requirement gathering and orchestration."""

from .config import ResolverConfig
from .executor import InMemoryExecutor, ResolutionExecutor
from .info import ResolutionManagementInfo
from .repositories import aggregate_remote_repositories
from .requirements import (
    update_dependency_set_requirements,
    update_module_set_requirements,
    update_repository_requirements,
)
from .resolver import DependencyResolver, DependencySetResolution, ResolutionResult
from .validator import check_assembly, validate_assembly

__all__ = [
    # Accumulator
    "ResolutionManagementInfo",
    # Requirement gathering
    "update_dependency_set_requirements",
    "update_module_set_requirements",
    "update_repository_requirements",
    # Repositories
    "aggregate_remote_repositories",
    # Validation
    "validate_assembly",
    "check_assembly",
    # Execution
    "ResolutionExecutor",
    "InMemoryExecutor",
    "DependencyResolver",
    "ResolutionResult",
    "DependencySetResolution",
    "ResolverConfig",
]
