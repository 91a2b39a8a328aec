"""Abstract interface for the GitLab directory cache."""

from abc import ABC, abstractmethod

from raw_proxy.core.models.directory import RepoDirectory


class DirectoryCache(ABC):
    """Durable store for the single RepoDirectory record.

    Implementations never raise from ``load`` or ``store``: a missing,
    undecodable or unreachable record reads as ``None`` and a failed write
    returns ``False``.
    """

    @abstractmethod
    async def load(self) -> RepoDirectory | None:
        """Read the cached directory, or ``None`` when unavailable."""

    @abstractmethod
    async def store(self, directory: RepoDirectory) -> bool:
        """Replace the cached directory. Returns ``False`` on failure."""

    async def close(self) -> None:
        """Release backing-store connections."""
