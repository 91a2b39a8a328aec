"""Business logic services for raw-proxy."""

from raw_proxy.services.proxy import RawProxyService
from raw_proxy.services.resolution import GitLabResolver

__all__ = [
    "GitLabResolver",
    "RawProxyService",
]
