"""Unit tests for ResolutionManagementInfo."""

from assembly_resolver.core.resolution import ResolutionManagementInfo
from assembly_resolver.core.scope import Scope, ScopeFilter
from tests.fixtures import create_project


class TestResolutionManagementInfo:
    """Tests for the per-pass accumulator."""

    def test_initial_state(self, main_project):
        info = ResolutionManagementInfo(main_project)
        assert info.is_resolution_required() is False
        assert info.is_resolved_transitively() is False
        assert info.scope_filter == ScopeFilter()
        assert info.enabled_projects == [main_project]

    def test_resolution_required_is_permanent(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.set_resolution_required()
        info.set_resolution_required()
        assert info.is_resolution_required()

    def test_transitive_flag_sticks(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.set_resolved_transitively(True)
        info.set_resolved_transitively(False)
        assert info.is_resolved_transitively() is True

    def test_transitive_false_then_true(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.set_resolved_transitively(False)
        assert info.is_resolved_transitively() is False
        info.set_resolved_transitively(True)
        assert info.is_resolved_transitively() is True

    def test_merge_scope_filter_widens(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.merge_scope_filter(ScopeFilter.for_declared_scope("provided"))
        info.merge_scope_filter(ScopeFilter.for_declared_scope("runtime"))
        assert info.scope_filter.included == {Scope.PROVIDED, Scope.COMPILE, Scope.RUNTIME}

    def test_scope_filter_is_a_copy(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.scope_filter.include_scope("test")
        assert not info.scope_filter.is_included("test")

    def test_enable_projects_deduplicates_by_coordinate(self, main_project):
        info = ResolutionManagementInfo(main_project)
        module = create_project("main-group", "module", base_dir=None)
        same_module = create_project("main-group", "module", base_dir=None)
        info.enable_projects([module])
        info.enable_projects([same_module, main_project])
        assert info.enabled_projects == [main_project, module]
        assert info.is_enabled(same_module)

    def test_to_dict(self, main_project):
        info = ResolutionManagementInfo(main_project)
        info.set_resolution_required()
        info.merge_scope_filter(ScopeFilter.for_declared_scope("system"))
        summary = info.to_dict()
        assert summary["project"] == "main-group:main-artifact:1"
        assert summary["resolution_required"] is True
        assert summary["resolved_transitively"] is False
        assert summary["scope_filter"]["included"] == ["system"]
        assert summary["enabled_projects"] == ["main-group:main-artifact:1"]
