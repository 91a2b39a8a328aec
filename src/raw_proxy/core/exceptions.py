"""Exception hierarchy for raw-proxy.

Every error carries the HTTP status it maps to and a short reason that is
safe to show to the caller.
"""


class RawProxyError(Exception):
    """Base exception for raw-proxy errors."""

    status_code: int = 500
    reason: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.reason
        super().__init__(self.message)


class ConfigurationError(RawProxyError):
    """Invalid or inconsistent settings."""

    reason = "Invalid configuration"


class PathParseError(RawProxyError):
    """The inbound path does not match the backend's path scheme."""

    status_code = 400
    reason = "Invalid path"


class ResolutionError(RawProxyError):
    """A GitLab ``namespace/repo`` could not be resolved to a project id."""

    reason = "Repository resolution failed"


class RepoNotFound(ResolutionError):
    """The repository is absent from a freshly rebuilt directory."""

    status_code = 404
    reason = "Repository not found"


class ProviderUnavailable(ResolutionError):
    """The GitLab project listing could not be fetched or decoded."""

    status_code = 502
    reason = "GitLab access failed"


class UrlBuildError(RawProxyError):
    """An upstream URL could not be built from the matched path.

    When raised from a resolution failure, the status and reason of the
    underlying error are kept.
    """

    status_code = 400
    reason = "Invalid path"

    def __init__(self, message: str | None = None, cause: RawProxyError | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.status_code = cause.status_code
            self.reason = cause.reason


class CredentialConfigError(RawProxyError):
    """A verified request needs credentials that are not configured."""

    reason = "Backend credentials not configured"


class UpstreamFetchError(RawProxyError):
    """The outbound fetch failed or returned an undecodable body."""

    reason = "Upstream access failed"

    def __init__(self, message: str | None = None, backend: str | None = None) -> None:
        super().__init__(message)
        if backend:
            self.reason = f"{backend} access failed"
