"""Backend credential injection for outbound requests."""

from collections.abc import Generator

import httpx

from raw_proxy.core.exceptions import CredentialConfigError
from raw_proxy.core.models.backend import BackendCredentials, BackendKind, BackendTarget


class BearerAuth(httpx.Auth):
    """Sets ``Authorization: Bearer <token>`` on every request."""

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class CredentialInjector:
    """Chooses the auth scheme for a backend.

    Credentials are only attached to verified requests. A verified request
    for a backend whose credentials are missing is an error, never a
    silent unauthenticated fetch.
    """

    def __init__(self, credentials: BackendCredentials) -> None:
        self._credentials = credentials

    def auth_for(self, target: BackendTarget, verified: bool) -> httpx.Auth | None:
        if not verified:
            return None

        creds = self._credentials
        if target.kind == BackendKind.GITHUB:
            if not creds.github_token:
                raise CredentialConfigError("GitHub token is not configured")
            return BearerAuth(creds.github_token)

        if target.kind == BackendKind.GITLAB:
            if not creds.gitlab_token:
                raise CredentialConfigError("GitLab token is not configured")
            return BearerAuth(creds.gitlab_token)

        if not creds.bitbucket_username or not creds.bitbucket_app_password:
            raise CredentialConfigError("Bitbucket username or app password is not configured")
        return httpx.BasicAuth(creds.bitbucket_username, creds.bitbucket_app_password)
