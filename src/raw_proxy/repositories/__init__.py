"""Persistence layer for raw-proxy."""

from raw_proxy.repositories.base import DirectoryCache
from raw_proxy.repositories.factory import RepositoryFactory

__all__ = ["DirectoryCache", "RepositoryFactory"]
