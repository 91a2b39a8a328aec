"""Pytest configuration and fixtures."""

import pytest

from doubles import StubProjectListing
from factories import RepoDirectoryEntryFactory
from raw_proxy.core.models.directory import RepoDirectoryEntry
from raw_proxy.repositories.directory.sqlite import SQLiteDirectoryCache


@pytest.fixture
async def sqlite_cache(tmp_path) -> SQLiteDirectoryCache:
    """Create a SQLite directory cache for testing."""
    cache = SQLiteDirectoryCache(
        db_path=str(tmp_path / "cache.db"),
        namespace="RAW_SERVICE_KV",
        key="REPO_LIST_KEY",
    )
    await cache.initialize()
    yield cache
    await cache.close()


@pytest.fixture
def sample_projects() -> list[RepoDirectoryEntry]:
    """A small project listing with mixed-case paths."""
    return [
        RepoDirectoryEntryFactory(id=42, path="proj", full_path="group/proj"),
        RepoDirectoryEntryFactory(id=7, path="Repo", full_path="Owner/Repo"),
    ]


@pytest.fixture
def stub_provider(sample_projects) -> StubProjectListing:
    return StubProjectListing(sample_projects)
