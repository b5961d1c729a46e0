"""Unit tests for per-directive requirement gathering."""

import pytest

from assembly_resolver.core.resolution import (
    ResolutionManagementInfo,
    update_dependency_set_requirements,
    update_module_set_requirements,
    update_repository_requirements,
)
from assembly_resolver.core.scope import Scope
from assembly_resolver.exceptions import ConfigurationError
from assembly_resolver.model import (
    Assembly,
    DependencySet,
    ModuleBinaries,
    ModuleSet,
    RepositoryEntry,
)


def module_set(includes, include_sub_modules, scope=None):
    ms = ModuleSet(includes=list(includes), include_sub_modules=include_sub_modules)
    ds = None
    if scope is not None:
        ds = DependencySet(scope=scope)
        ms.binaries = ModuleBinaries([ds])
    return ms, ds


class TestDependencySetRequirements:
    """Tests for update_dependency_set_requirements."""

    def test_compile_non_transitive(self, main_project):
        info = ResolutionManagementInfo(main_project)
        ds1 = DependencySet(scope="compile", use_transitive_dependencies=False)
        ds2 = DependencySet(scope="system", use_transitive_dependencies=False)

        update_dependency_set_requirements(ds1, info, main_project)
        update_dependency_set_requirements(ds2, info, main_project)

        assert info.is_resolution_required()
        assert not info.is_resolved_transitively()
        included = info.scope_filter.included
        assert Scope.COMPILE in included
        assert Scope.SYSTEM in included
        assert Scope.PROVIDED in included
        assert Scope.RUNTIME not in included
        assert Scope.TEST not in included

    def test_resolution_required_after_first_and_stays(self, main_project):
        info = ResolutionManagementInfo(main_project)
        for scope in ["provided", "system", "compile"]:
            update_dependency_set_requirements(DependencySet(scope=scope), info)
            assert info.is_resolution_required()

    def test_scope_merge_order_independent(self, main_project):
        forward = ResolutionManagementInfo(main_project)
        update_dependency_set_requirements(DependencySet(scope="compile"), forward)
        update_dependency_set_requirements(DependencySet(scope="provided"), forward)

        reverse = ResolutionManagementInfo(main_project)
        update_dependency_set_requirements(DependencySet(scope="provided"), reverse)
        update_dependency_set_requirements(DependencySet(scope="compile"), reverse)

        assert forward.scope_filter == reverse.scope_filter

    def test_transitivity_sticks(self, main_project):
        info = ResolutionManagementInfo(main_project)
        update_dependency_set_requirements(
            DependencySet(use_transitive_dependencies=True), info
        )
        update_dependency_set_requirements(
            DependencySet(use_transitive_dependencies=False), info
        )
        assert info.is_resolved_transitively()

    def test_default_dependency_set(self, main_project):
        info = ResolutionManagementInfo(main_project)
        update_dependency_set_requirements(DependencySet(), info)
        assert info.scope_filter.included == {Scope.COMPILE, Scope.RUNTIME}
        assert info.is_resolved_transitively()

    def test_does_not_enable_projects(self, reactor):
        info = ResolutionManagementInfo(reactor["project"])
        update_dependency_set_requirements(DependencySet(), info)
        assert info.enabled_projects == [reactor["project"]]

    def test_invalid_scope_leaves_info_untouched(self, main_project):
        info = ResolutionManagementInfo(main_project)
        with pytest.raises(ConfigurationError):
            update_dependency_set_requirements(DependencySet(scope="bogus"), info)
        assert not info.is_resolution_required()
        assert not info.is_resolved_transitively()


class TestModuleSetRequirements:
    """Tests for update_module_set_requirements."""

    def test_module_sets(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms1, ds1 = module_set(["*module-1*"], False, scope="compile")
        ms2, ds2 = module_set(["main-group:*"], True, scope="test")

        update_module_set_requirements(ms1, ds1, info, reactor_context, "test-assembly")
        update_module_set_requirements(ms2, ds2, info, reactor_context, "test-assembly")

        assert info.is_resolution_required()

        enabled = info.enabled_projects
        assert reactor["project"] in enabled
        assert reactor["module1"] in enabled
        # sub-modules are not traversable for the first module-set
        assert reactor["module1a"] not in enabled
        assert reactor["module1b"] not in enabled
        assert reactor["module2"] in enabled
        assert reactor["module2a"] in enabled

        assert info.scope_filter.included == set(Scope)

    def test_traversal_disabled_keeps_top_module_only(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms, ds = module_set(["*module-1*"], False, scope="runtime")
        update_module_set_requirements(ms, ds, info, reactor_context)
        assert info.enabled_projects == [reactor["project"], reactor["module1"]]

    def test_traversal_enabled_includes_sub_modules(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms, ds = module_set(["main-group:module-2*"], True, scope="runtime")
        update_module_set_requirements(ms, ds, info, reactor_context)
        assert reactor["module2"] in info.enabled_projects
        assert reactor["module2a"] in info.enabled_projects

    def test_no_match_still_merges_scope(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms, ds = module_set(["nobody:*"], True, scope="provided")
        update_module_set_requirements(ms, ds, info, reactor_context)
        assert info.enabled_projects == [reactor["project"]]
        assert info.is_resolution_required()
        assert info.scope_filter.included == {Scope.PROVIDED}

    def test_without_dependency_set_only_enables(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms, _ = module_set(["main-group:*"], True)
        update_module_set_requirements(ms, None, info, reactor_context)
        assert reactor["module2"] in info.enabled_projects
        assert not info.is_resolution_required()
        assert info.scope_filter.included == set()

    def test_invalid_nested_scope_enables_nothing(self, reactor, reactor_context):
        info = ResolutionManagementInfo(reactor["project"])
        ms, ds = module_set(["main-group:*"], True, scope="everything")
        with pytest.raises(ConfigurationError):
            update_module_set_requirements(ms, ds, info, reactor_context)
        assert info.enabled_projects == [reactor["project"]]


class TestRepositoryRequirements:
    """Tests for update_repository_requirements."""

    def test_repository_scopes(self, main_project):
        assembly = Assembly(
            repositories=[RepositoryEntry(scope="compile"), RepositoryEntry(scope="system")]
        )
        info = ResolutionManagementInfo(main_project)
        update_repository_requirements(assembly, info)

        assert info.is_resolution_required()
        included = info.scope_filter.included
        assert Scope.COMPILE in included
        assert Scope.SYSTEM in included
        assert Scope.PROVIDED in included
        assert Scope.RUNTIME not in included
        assert Scope.TEST not in included

    def test_no_repositories(self, main_project):
        info = ResolutionManagementInfo(main_project)
        update_repository_requirements(Assembly(), info)
        assert not info.is_resolution_required()

    def test_never_touches_transitivity_or_projects(self, main_project):
        info = ResolutionManagementInfo(main_project)
        update_repository_requirements(Assembly(repositories=[RepositoryEntry("test")]), info)
        assert not info.is_resolved_transitively()
        assert info.enabled_projects == [main_project]

    def test_one_bad_entry_aborts(self, main_project):
        assembly = Assembly(
            repositories=[RepositoryEntry(scope="compile"), RepositoryEntry(scope="nope")]
        )
        info = ResolutionManagementInfo(main_project)
        with pytest.raises(ConfigurationError):
            update_repository_requirements(assembly, info)
        assert not info.is_resolution_required()
