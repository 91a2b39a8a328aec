"""SQLite implementation of the GitLab directory cache."""

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite
import structlog
from pydantic import ValidationError

from raw_proxy.core.models.directory import RepoDirectory
from raw_proxy.repositories.base import DirectoryCache

logger = structlog.get_logger(__name__)

CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    namespace TEXT NOT NULL,
    key TEXT NOT NULL,
    value TEXT NOT NULL,
    updated_at TEXT,
    PRIMARY KEY (namespace, key)
);
"""


class SQLiteDirectoryCache(DirectoryCache):
    """Keeps the directory as one JSON row in a namespaced key/value table.

    Uses aiosqlite for async SQLite operations. The record is written with
    a single ``INSERT OR REPLACE`` so readers never see a partial value.
    """

    def __init__(self, db_path: str, namespace: str, key: str) -> None:
        self._db_path = db_path
        self._namespace = namespace
        self._key = key
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        """Open the database and create the table."""
        Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db = await aiosqlite.connect(self._db_path)
        await self._db.executescript(CREATE_TABLES_SQL)
        await self._db.commit()
        logger.info("SQLite directory cache initialized", db_path=self._db_path)

    async def _ensure_connected(self) -> aiosqlite.Connection:
        if self._db is None:
            await self.initialize()
        assert self._db is not None
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    async def load(self) -> RepoDirectory | None:
        try:
            db = await self._ensure_connected()
            cursor = await db.execute(
                "SELECT value FROM kv_store WHERE namespace = ? AND key = ?",
                (self._namespace, self._key),
            )
            row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            logger.warning("Directory cache read failed", error=str(e))
            return None

        if row is None:
            return None

        try:
            return RepoDirectory.model_validate_json(row[0])
        except ValidationError as e:
            logger.warning("Cached directory undecodable", errors=e.error_count())
            return None

    async def store(self, directory: RepoDirectory) -> bool:
        try:
            db = await self._ensure_connected()
            await db.execute(
                """INSERT OR REPLACE INTO kv_store (namespace, key, value, updated_at)
                VALUES (?, ?, ?, ?)""",
                (
                    self._namespace,
                    self._key,
                    directory.model_dump_json(),
                    datetime.now(timezone.utc).isoformat(),
                ),
            )
            await db.commit()
        except (aiosqlite.Error, OSError) as e:
            logger.warning("Directory cache write failed", error=str(e))
            return False

        logger.debug("Directory cached", entries=len(directory))
        return True
