"""Redis implementation of the GitLab directory cache."""

import redis.asyncio as redis
import structlog
from pydantic import ValidationError
from redis.exceptions import RedisError

from raw_proxy.core.models.directory import RepoDirectory
from raw_proxy.repositories.base import DirectoryCache

logger = structlog.get_logger(__name__)


class RedisDirectoryCache(DirectoryCache):
    """Keeps the directory as a single JSON string under ``namespace:key``."""

    def __init__(self, redis_client: redis.Redis, namespace: str, key: str) -> None:
        self.redis = redis_client
        self._cache_key = f"{namespace}:{key}"

    @classmethod
    def from_url(cls, url: str, namespace: str, key: str) -> "RedisDirectoryCache":
        return cls(redis.Redis.from_url(url), namespace=namespace, key=key)

    async def close(self) -> None:
        await self.redis.aclose()

    async def load(self) -> RepoDirectory | None:
        try:
            value = await self.redis.get(self._cache_key)
        except RedisError as e:
            logger.warning("Directory cache read failed", error=str(e))
            return None

        if value is None:
            return None

        try:
            return RepoDirectory.model_validate_json(value)
        except ValidationError as e:
            logger.warning("Cached directory undecodable", errors=e.error_count())
            return None

    async def store(self, directory: RepoDirectory) -> bool:
        try:
            await self.redis.set(self._cache_key, directory.model_dump_json())
        except RedisError as e:
            logger.warning("Directory cache write failed", error=str(e))
            return False

        logger.debug("Directory cached", key=self._cache_key, entries=len(directory))
        return True
