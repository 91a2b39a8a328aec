"""Domain models for raw-proxy."""

from raw_proxy.core.models.backend import (
    DEFAULT_BASE_URLS,
    BackendCredentials,
    BackendKind,
    BackendTarget,
)
from raw_proxy.core.models.directory import RepoDirectory, RepoDirectoryEntry
from raw_proxy.core.models.path import MatchedPath

__all__ = [
    "BackendKind",
    "BackendTarget",
    "BackendCredentials",
    "DEFAULT_BASE_URLS",
    "MatchedPath",
    "RepoDirectory",
    "RepoDirectoryEntry",
]
