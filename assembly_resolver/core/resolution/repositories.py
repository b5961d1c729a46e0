"""Merge external and project-declared remote repositories."""

import logging
from typing import Iterable, List, Set

from ...model import Project, RemoteRepository

logger = logging.getLogger(__name__)


def aggregate_remote_repositories(
    external: Iterable[RemoteRepository], projects: Iterable[Project]
) -> List[RemoteRepository]:
    """Combine repositories, first occurrence wins.

    External repositories come first in their given order, followed by each
    project's declared repositories in order. A repository whose id or
    normalized url was already taken by an earlier one is dropped.

    Parameters
    ----------
    external : Iterable[RemoteRepository]
        Externally supplied repositories, highest priority first
    projects : Iterable[Project]
        Enabled projects whose declared repositories are appended

    Returns
    -------
    List[RemoteRepository]
        De-duplicated repositories in priority order
    """
    result: List[RemoteRepository] = []
    seen_ids: Set[str] = set()
    seen_urls: Set[str] = set()

    def add(repository: RemoteRepository, origin: str) -> None:
        url = repository.identity
        if repository.id in seen_ids or url in seen_urls:
            logger.debug(
                "Dropping duplicate repository '%s' (%s) from %s",
                repository.id,
                repository.url,
                origin,
            )
            return
        seen_ids.add(repository.id)
        seen_urls.add(url)
        result.append(repository)

    for repository in external:
        add(repository, "external repositories")
    for project in projects:
        for repository in project.remote_repositories:
            add(repository, str(project))

    return result
