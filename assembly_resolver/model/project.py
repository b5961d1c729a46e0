"""Read-only project model consumed by the resolution planner."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit, urlunsplit

from ..core.scope import Scope, parse_scope
from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class ProjectCoordinate:
    """Identity of a project or artifact: ``group:name:version``."""

    group: str
    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    @classmethod
    def parse(cls, text: str) -> "ProjectCoordinate":
        """Parse ``group:name:version``.

        Raises
        ------
        ConfigurationError
            If the text does not have exactly three non-empty segments
        """
        parts = text.split(":")
        if len(parts) != 3 or not all(parts):
            raise ConfigurationError(f"Invalid coordinate '{text}', expected group:name:version")
        return cls(*parts)


@dataclass(frozen=True)
class Artifact:
    """A produced or dependency artifact.

    Attributes
    ----------
    coordinate : ProjectCoordinate
        Artifact identity
    scope : Scope
        Scope the artifact was declared (or reached) under
    type : str
        Packaging type, e.g. "jar" or "pom"
    file : str, optional
        Local file once resolved; None while unresolved
    direct : bool
        True for a declared dependency, False when reached transitively
    """

    coordinate: ProjectCoordinate
    scope: Scope = Scope.COMPILE
    type: str = "jar"
    file: Optional[str] = None
    direct: bool = True

    @property
    def conflict_id(self) -> str:
        return f"{self.coordinate.group}:{self.coordinate.name}:{self.type}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artifact":
        return cls(
            coordinate=ProjectCoordinate.parse(data["coordinate"]),
            scope=parse_scope(data.get("scope", "compile")),
            type=data.get("type", "jar"),
            file=data.get("file"),
            direct=data.get("direct", True),
        )


def normalize_url(url: str) -> str:
    """Normalize a repository url for identity comparison.

    Scheme and host are lower-cased and trailing slashes dropped:
        "HTTP://Repo.Example.com/maven2/" -> "http://repo.example.com/maven2"
    """
    parts = urlsplit(url.strip())
    path = parts.path.rstrip("/")
    return urlunsplit(
        (parts.scheme.lower(), parts.netloc.lower(), path, parts.query, parts.fragment)
    )


@dataclass(frozen=True)
class RemoteRepository:
    """A remote artifact repository.

    Two repositories sharing an id, or pointing at the same normalized url,
    are the same repository.
    """

    id: str
    url: str

    @property
    def identity(self) -> str:
        """Normalized url."""
        return normalize_url(self.url)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RemoteRepository":
        return cls(id=data["id"], url=data["url"])


@dataclass(eq=False)
class Project:
    """A build project as loaded by the host tool.

    Projects compare and hash by coordinate, so a reactor may hold several
    model objects for one coordinate without them being counted twice.

    Attributes
    ----------
    coordinate : ProjectCoordinate
        Project identity
    base_dir : Path, optional
        Directory holding the project's build file
    modules : List[str]
        Declared module directory names, relative to ``base_dir``
    artifact : Artifact, optional
        The artifact the project itself produces
    artifacts : List[Artifact]
        Declared and transitively reached dependency artifacts
    remote_repositories : List[RemoteRepository]
        Remote repositories declared by the project, in priority order
    """

    coordinate: ProjectCoordinate
    base_dir: Optional[Path] = None
    modules: List[str] = field(default_factory=list)
    artifact: Optional[Artifact] = None
    artifacts: List[Artifact] = field(default_factory=list)
    remote_repositories: List[RemoteRepository] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash(self.coordinate)

    def __str__(self) -> str:
        return str(self.coordinate)

    @property
    def group(self) -> str:
        return self.coordinate.group

    @property
    def name(self) -> str:
        return self.coordinate.name

    @property
    def version(self) -> str:
        return self.coordinate.version

    def add_module(self, module: str) -> None:
        self.modules.append(module)

    def dependency_artifacts(self) -> List[Artifact]:
        """Directly declared dependency artifacts only."""
        return [a for a in self.artifacts if a.direct]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Create Project from a dictionary.

        Parameters
        ----------
        data : Dict[str, Any]
            Keys: coordinate (required), base_dir, modules, artifact,
            artifacts, repositories

        Returns
        -------
        Project
            Constructed project
        """
        coordinate = ProjectCoordinate.parse(data["coordinate"])
        base_dir = data.get("base_dir")
        artifact = data.get("artifact")
        return cls(
            coordinate=coordinate,
            base_dir=Path(base_dir) if base_dir is not None else None,
            modules=list(data.get("modules", [])),
            artifact=Artifact.from_dict(artifact) if artifact else None,
            artifacts=[Artifact.from_dict(a) for a in data.get("artifacts", [])],
            remote_repositories=[
                RemoteRepository.from_dict(r) for r in data.get("repositories", [])
            ],
        )
