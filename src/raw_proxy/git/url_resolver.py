"""Upstream URL building, one strategy per backend."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from urllib.parse import quote

from raw_proxy.core.exceptions import ResolutionError, UrlBuildError
from raw_proxy.core.models.backend import BackendKind, BackendTarget
from raw_proxy.core.models.path import MatchedPath

if TYPE_CHECKING:
    from raw_proxy.services.resolution import GitLabResolver

# RFC 3986 pchar sub-delims kept literal when re-encoding path segments
_PATH_SAFE = "!$&'()*+,;=:@"


def quote_path(path: str) -> str:
    """Percent-encode each ``/``-separated segment of a decoded path."""
    return "/".join(quote(segment, safe=_PATH_SAFE) for segment in path.split("/"))


class BackendStrategy(ABC):
    """Translates a matched path into the backend's raw-content URL."""

    kind: BackendKind

    @abstractmethod
    async def build_url(
        self,
        base_url: str,
        matched: MatchedPath,
        resolver: "GitLabResolver | None" = None,
    ) -> str:
        """Build the upstream URL for ``matched``."""


class GithubStrategy(BackendStrategy):
    """``{base}/{owner}/{repo}/{branch}/{path}`` on raw.githubusercontent.com."""

    kind = BackendKind.GITHUB

    async def build_url(
        self,
        base_url: str,
        matched: MatchedPath,
        resolver: "GitLabResolver | None" = None,
    ) -> str:
        return (
            f"{base_url}/{quote_path(matched.repo_identifier)}"
            f"/{quote_path(matched.branch)}/{quote_path(matched.file_path)}"
        )


class BitbucketStrategy(BackendStrategy):
    """``{base}/{owner}/{repo}/raw/{branch}/{path}``, path segments re-encoded."""

    kind = BackendKind.BITBUCKET

    async def build_url(
        self,
        base_url: str,
        matched: MatchedPath,
        resolver: "GitLabResolver | None" = None,
    ) -> str:
        return (
            f"{base_url}/{quote_path(matched.repo_identifier)}"
            f"/raw/{quote_path(matched.branch)}/{quote_path(matched.file_path)}"
        )


class GitlabStrategy(BackendStrategy):
    """Repository files API, addressed by numeric project id."""

    kind = BackendKind.GITLAB

    async def build_url(
        self,
        base_url: str,
        matched: MatchedPath,
        resolver: "GitLabResolver | None" = None,
    ) -> str:
        if resolver is None:
            raise UrlBuildError("GitLab URLs need a project resolver")

        try:
            project_id = await resolver.resolve(matched.repo_identifier)
        except ResolutionError as e:
            raise UrlBuildError(str(e), cause=e) from e

        encoded_path = quote(matched.file_path, safe="")
        ref = quote(matched.branch, safe="")
        return (
            f"{base_url}/api/v4/projects/{project_id}"
            f"/repository/files/{encoded_path}/raw?ref={ref}"
        )


_STRATEGIES: dict[BackendKind, BackendStrategy] = {
    strategy.kind: strategy
    for strategy in (GithubStrategy(), GitlabStrategy(), BitbucketStrategy())
}


def get_strategy(kind: BackendKind) -> BackendStrategy:
    return _STRATEGIES[kind]


async def build_url(
    target: BackendTarget,
    matched: MatchedPath,
    resolver: "GitLabResolver | None" = None,
) -> str:
    """Build the upstream raw-content URL for ``matched`` on ``target``.

    Raises:
        UrlBuildError: The GitLab project could not be resolved.
    """
    return await get_strategy(target.kind).build_url(target.base_url, matched, resolver)
