"""Repository factory for creating the directory cache."""

from typing import TYPE_CHECKING

import structlog

from raw_proxy.core.exceptions import ConfigurationError
from raw_proxy.repositories.base import DirectoryCache

if TYPE_CHECKING:
    from raw_proxy.config.settings import Settings

logger = structlog.get_logger(__name__)


class RepositoryFactory:
    """Factory for creating the GitLab directory cache.

    Picks the backing store named by ``directory_cache_store`` and keeps
    one instance per factory.
    """

    def __init__(self, settings: "Settings") -> None:
        self._settings = settings
        self._directory_cache: DirectoryCache | None = None

    async def get_directory_cache(self) -> DirectoryCache:
        """Get or create the directory cache."""
        if self._directory_cache is None:
            store = self._settings.directory_cache_store.lower()

            if store == "sqlite":
                from raw_proxy.repositories.directory.sqlite import SQLiteDirectoryCache

                cache = SQLiteDirectoryCache(
                    db_path=self._settings.sqlite_path,
                    namespace=self._settings.cache_namespace,
                    key=self._settings.cache_key,
                )
                await cache.initialize()
                self._directory_cache = cache
            elif store == "redis":
                from raw_proxy.repositories.directory.redis import RedisDirectoryCache

                self._directory_cache = RedisDirectoryCache.from_url(
                    self._settings.redis_url,
                    namespace=self._settings.cache_namespace,
                    key=self._settings.cache_key,
                )
            else:
                raise ConfigurationError(f"Unknown directory cache store: {store}")

            logger.info("Directory cache created", store=store)

        return self._directory_cache

    async def close(self) -> None:
        """Close the directory cache connection."""
        if self._directory_cache is not None:
            await self._directory_cache.close()
        self._directory_cache = None
