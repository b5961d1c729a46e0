"""Assembly directives relevant to dependency resolution.

Scope values are kept exactly as declared; they are checked when a
directive is processed so that a bad value aborts the pass that uses it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DependencySet:
    """Directive selecting the project's dependencies for packaging.

    Attributes
    ----------
    scope : str
        Declared scope (default "runtime")
    use_transitive_dependencies : bool
        Whether transitively reached dependencies are packaged too
    use_project_artifact : bool
        Whether the project's own artifact is packaged with the set
    includes, excludes : List[str]
        Artifact patterns applied at packaging time
    output_directory : str, optional
        Destination inside the archive
    """

    scope: str = "runtime"
    use_transitive_dependencies: bool = True
    use_project_artifact: bool = True
    includes: List[str] = field(default_factory=list)
    excludes: List[str] = field(default_factory=list)
    output_directory: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DependencySet":
        return cls(
            scope=data.get("scope", "runtime"),
            use_transitive_dependencies=data.get("use_transitive_dependencies", True),
            use_project_artifact=data.get("use_project_artifact", True),
            includes=list(data.get("includes", [])),
            excludes=list(data.get("excludes", [])),
            output_directory=data.get("output_directory"),
        )


@dataclass
class ModuleBinaries:
    """Binaries section of a module-set: the nested dependency-sets."""

    dependency_sets: List[DependencySet] = field(default_factory=list)

    def add_dependency_set(self, dependency_set: DependencySet) -> None:
        self.dependency_sets.append(dependency_set)


@dataclass
class ModuleSet:
    """Directive selecting sibling projects of a multi-module build.

    Attributes
    ----------
    includes, excludes : List[str]
        Coordinate patterns (``group:name:version`` with ``*`` wildcards)
    include_sub_modules : bool
        Whether modules nested below a matched module are selected too
    binaries : ModuleBinaries, optional
        Nested dependency-sets applied to the selected modules
    """

    includes: List[str] = field(default_factory=list)
    excludes: List[str] = field(default_factory=list)
    include_sub_modules: bool = True
    binaries: Optional[ModuleBinaries] = None

    def add_include(self, pattern: str) -> None:
        self.includes.append(pattern)

    def add_exclude(self, pattern: str) -> None:
        self.excludes.append(pattern)

    @property
    def dependency_sets(self) -> List[DependencySet]:
        if self.binaries is None:
            return []
        return self.binaries.dependency_sets

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModuleSet":
        binaries = data.get("binaries")
        return cls(
            includes=list(data.get("includes", [])),
            excludes=list(data.get("excludes", [])),
            include_sub_modules=data.get("include_sub_modules", True),
            binaries=ModuleBinaries(
                dependency_sets=[
                    DependencySet.from_dict(ds)
                    for ds in binaries.get("dependency_sets", [])
                ]
            )
            if binaries is not None
            else None,
        )


@dataclass
class RepositoryEntry:
    """Directive packaging a repository layout of the project's dependencies."""

    scope: str = "runtime"
    output_directory: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RepositoryEntry":
        return cls(
            scope=data.get("scope", "runtime"),
            output_directory=data.get("output_directory"),
        )


@dataclass
class Assembly:
    """Packaging directives of one assembly descriptor."""

    id: str = "assembly"
    dependency_sets: List[DependencySet] = field(default_factory=list)
    module_sets: List[ModuleSet] = field(default_factory=list)
    repositories: List[RepositoryEntry] = field(default_factory=list)

    def add_dependency_set(self, dependency_set: DependencySet) -> None:
        self.dependency_sets.append(dependency_set)

    def add_module_set(self, module_set: ModuleSet) -> None:
        self.module_sets.append(module_set)

    def add_repository(self, repository: RepositoryEntry) -> None:
        self.repositories.append(repository)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "dependency_sets": len(self.dependency_sets),
            "module_sets": len(self.module_sets),
            "repositories": len(self.repositories),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assembly":
        """Create Assembly from an already-parsed descriptor dictionary.

        Parameters
        ----------
        data : Dict[str, Any]
            Keys: id, dependency_sets, module_sets, repositories

        Returns
        -------
        Assembly
            Constructed assembly
        """
        return cls(
            id=data.get("id", "assembly"),
            dependency_sets=[DependencySet.from_dict(d) for d in data.get("dependency_sets", [])],
            module_sets=[ModuleSet.from_dict(m) for m in data.get("module_sets", [])],
            repositories=[RepositoryEntry.from_dict(r) for r in data.get("repositories", [])],
        )
