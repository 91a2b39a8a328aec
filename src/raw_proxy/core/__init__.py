"""Core domain models and interfaces for raw-proxy."""

from raw_proxy.core.exceptions import (
    ConfigurationError,
    CredentialConfigError,
    PathParseError,
    ProviderUnavailable,
    RawProxyError,
    RepoNotFound,
    ResolutionError,
    UpstreamFetchError,
    UrlBuildError,
)
from raw_proxy.core.models import (
    BackendCredentials,
    BackendKind,
    BackendTarget,
    MatchedPath,
    RepoDirectory,
    RepoDirectoryEntry,
)

__all__ = [
    # Models
    "BackendKind",
    "BackendTarget",
    "BackendCredentials",
    "MatchedPath",
    "RepoDirectory",
    "RepoDirectoryEntry",
    # Exceptions
    "RawProxyError",
    "ConfigurationError",
    "PathParseError",
    "ResolutionError",
    "RepoNotFound",
    "ProviderUnavailable",
    "UrlBuildError",
    "CredentialConfigError",
    "UpstreamFetchError",
]
