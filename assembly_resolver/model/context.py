"""Build context handed to the planner by the host tool."""

from dataclasses import dataclass, field
from typing import List

from .project import Project, RemoteRepository


@dataclass
class BuildContext:
    """Everything the planner needs to know about the running build.

    Attributes
    ----------
    project : Project
        The project the assembly is built for (root of module traversal)
    reactor_projects : List[Project]
        All projects of the multi-module build; defaults to the project alone
    remote_repositories : List[RemoteRepository]
        Externally supplied repositories, highest priority first
    """

    project: Project
    reactor_projects: List[Project] = field(default_factory=list)
    remote_repositories: List[RemoteRepository] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.reactor_projects:
            self.reactor_projects = [self.project]
