"""GitLab repository-identifier resolution."""

from typing import Protocol

import structlog

from raw_proxy.core.exceptions import RepoNotFound
from raw_proxy.core.models.directory import RepoDirectory, RepoDirectoryEntry
from raw_proxy.repositories.base import DirectoryCache

logger = structlog.get_logger(__name__)


class ProjectListing(Protocol):
    async def list_owned_projects(self) -> list[RepoDirectoryEntry]: ...


class GitLabResolver:
    """Maps ``namespace/repo`` to a GitLab project id.

    A cached directory answers lookups without network access. On a miss,
    whether the cache is empty or just stale, the directory is rebuilt
    once from the project listing and written back on a best-effort basis.
    Concurrent rebuilds may race; the last write wins.
    """

    def __init__(self, cache: DirectoryCache, provider: ProjectListing) -> None:
        self._cache = cache
        self._provider = provider

    async def resolve(self, owner_repo: str) -> int:
        """Return the project id for ``owner_repo``.

        Raises:
            RepoNotFound: The repository is missing from a fresh listing.
            ProviderUnavailable: The listing could not be fetched.
        """
        owner_repo = owner_repo.lower()

        cached = await self._cache.load()
        if cached is not None:
            entry = cached.lookup(owner_repo)
            if entry is not None:
                logger.debug("Directory cache hit", repo=owner_repo, project_id=entry.id)
                return entry.id

        logger.info("Rebuilding GitLab directory", repo=owner_repo, cached=cached is not None)
        directory = await self.rebuild()

        entry = directory.lookup(owner_repo)
        if entry is None:
            raise RepoNotFound(f"Repository not found: {owner_repo}")
        return entry.id

    async def rebuild(self) -> RepoDirectory:
        """Fetch the project listing and replace the cached directory."""
        projects = await self._provider.list_owned_projects()
        directory = RepoDirectory.from_entries(projects)

        if not await self._cache.store(directory):
            logger.warning("Directory cache not updated", entries=len(directory))

        return directory
