"""Pytest configuration and shared fixtures for assembly-resolver tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assembly_resolver.core.scope import Scope
from assembly_resolver.model import BuildContext, RemoteRepository
from tests.fixtures import create_artifact, create_project, create_reactor


# ============================================================================
# Project Fixtures
# ============================================================================


@pytest.fixture
def main_project():
    """Single project with no modules."""
    return create_project("main-group", "main-artifact", base_dir=Path("base"))


@pytest.fixture
def reactor():
    """Projects of a three-level multi-module build, keyed by role."""
    return create_reactor()


@pytest.fixture
def reactor_context(reactor) -> BuildContext:
    """Build context rooted at the reactor's top project."""
    return BuildContext(
        project=reactor["project"],
        reactor_projects=list(reactor.values()),
    )


@pytest.fixture
def project_with_dependencies():
    """Project with direct and transitive dependencies in every scope."""
    project = create_project(
        "group",
        "app",
        base_dir=Path("app"),
        repositories=[RemoteRepository("project.1", "http://test.com/project")],
    )
    project.artifacts = [
        create_artifact("compile-dep", Scope.COMPILE),
        create_artifact("provided-dep", Scope.PROVIDED),
        create_artifact("system-dep", Scope.SYSTEM),
        create_artifact("runtime-dep", Scope.RUNTIME),
        create_artifact("test-dep", Scope.TEST),
        create_artifact("compile-transitive", Scope.COMPILE, direct=False),
        create_artifact("runtime-transitive", Scope.RUNTIME, direct=False),
    ]
    return project


# ============================================================================
# Repository Fixtures
# ============================================================================


@pytest.fixture
def external_repositories():
    return [
        RemoteRepository("test.1", "http://test.com/path"),
        RemoteRepository("test.2", "http://test2.com/path"),
    ]


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_resolver_config(tmp_path) -> Path:
    """Create sample resolver configuration file."""
    import yaml

    config = {
        "resolver": {
            "validate_assembly": False,
            "resolve_enabled_projects": False,
            "log_path": str(tmp_path / "logs" / "resolver.log"),
            "log_level": "DEBUG",
            "timestamped_log": False,
        },
    }

    path = tmp_path / "resolver.yaml"
    with open(path, "w") as f:
        yaml.dump(config, f)

    return path
