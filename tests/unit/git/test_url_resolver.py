"""Tests for upstream URL building."""

import pytest

from doubles import StubProjectListing
from factories import MatchedPathFactory
from raw_proxy.core.exceptions import ProviderUnavailable, RepoNotFound, UrlBuildError
from raw_proxy.core.models.backend import BackendKind, BackendTarget
from raw_proxy.git.path_matcher import match_path
from raw_proxy.git.url_resolver import (
    BitbucketStrategy,
    GithubStrategy,
    GitlabStrategy,
    build_url,
    get_strategy,
)
from raw_proxy.services.resolution import GitLabResolver


class FixedResolver:
    """Resolver double returning a fixed id or raising."""

    def __init__(self, project_id: int | None = None, error: Exception | None = None) -> None:
        self.project_id = project_id
        self.error = error
        self.requested: list[str] = []

    async def resolve(self, owner_repo: str) -> int:
        self.requested.append(owner_repo)
        if self.error is not None:
            raise self.error
        return self.project_id


class UnreachableListing:
    async def list_owned_projects(self):
        raise ProviderUnavailable("GitLab project listing failed: connection refused")


@pytest.mark.unit
class TestBuildUrl:
    """Tests for build_url."""

    @pytest.mark.asyncio
    async def test_github_drops_raw_anchor(self) -> None:
        target = BackendTarget.default(BackendKind.GITHUB)
        matched = match_path("/octocat/Hello-World/raw/main/README.md", target.kind)

        url = await build_url(target, matched)
        assert url == "https://raw.githubusercontent.com/octocat/hello-world/main/README.md"

    @pytest.mark.asyncio
    async def test_github_without_anchor(self) -> None:
        target = BackendTarget.default(BackendKind.GITHUB)
        matched = match_path("/octocat/Hello-World/main/docs/a.md", target.kind)

        url = await build_url(target, matched)
        assert url == "https://raw.githubusercontent.com/octocat/hello-world/main/docs/a.md"

    @pytest.mark.asyncio
    async def test_gitlab_percent_encodes_file_path(self) -> None:
        target = BackendTarget.default(BackendKind.GITLAB)
        matched = match_path("/group/proj/-/raw/main/src/a b.rs", target.kind)
        resolver = FixedResolver(project_id=42)

        url = await build_url(target, matched, resolver)
        assert url == (
            "https://gitlab.com/api/v4/projects/42/repository/files/src%2Fa%20b.rs/raw?ref=main"
        )
        assert resolver.requested == ["group/proj"]

    @pytest.mark.asyncio
    async def test_bitbucket_reencodes_file_path(self) -> None:
        target = BackendTarget.default(BackendKind.BITBUCKET)
        matched = match_path("/Team/Repo/raw/master/dir/a b.txt", target.kind)

        url = await build_url(target, matched)
        assert url == "https://bitbucket.org/team/repo/raw/master/dir/a%20b.txt"

    @pytest.mark.parametrize(
        ("file_path", "encoded"),
        [
            ("a?b.txt", "a%3Fb.txt"),
            ("c#d.txt", "c%23d.txt"),
            ("e%25f.txt", "e%2525f.txt"),
            ("dir/g@h+i.txt", "dir/g@h+i.txt"),
        ],
    )
    @pytest.mark.asyncio
    async def test_reserved_characters_stay_in_path(self, file_path, encoded) -> None:
        matched = MatchedPathFactory(repo_identifier="o/r", branch="main", file_path=file_path)

        github = await build_url(BackendTarget.default(BackendKind.GITHUB), matched)
        bitbucket = await build_url(BackendTarget.default(BackendKind.BITBUCKET), matched)

        assert github == f"https://raw.githubusercontent.com/o/r/main/{encoded}"
        assert bitbucket == f"https://bitbucket.org/o/r/raw/main/{encoded}"

    @pytest.mark.asyncio
    async def test_custom_base_url_trailing_slash(self) -> None:
        target = BackendTarget(kind=BackendKind.GITHUB, base_url="https://mirror.example.com/")
        url = await build_url(target, MatchedPathFactory())
        assert url == "https://mirror.example.com/octocat/hello-world/main/README.md"

    @pytest.mark.asyncio
    async def test_gitlab_repo_not_found_wraps_error(self) -> None:
        target = BackendTarget.default(BackendKind.GITLAB)
        resolver = FixedResolver(error=RepoNotFound("Repository not found: group/missing"))

        with pytest.raises(UrlBuildError) as exc_info:
            await build_url(target, MatchedPathFactory(repo_identifier="group/missing"), resolver)

        assert isinstance(exc_info.value.cause, RepoNotFound)
        assert exc_info.value.status_code == 404
        assert exc_info.value.reason == "Repository not found"

    @pytest.mark.asyncio
    async def test_gitlab_provider_failure_wraps_error(self, sqlite_cache) -> None:
        target = BackendTarget.default(BackendKind.GITLAB)
        resolver = GitLabResolver(cache=sqlite_cache, provider=UnreachableListing())

        with pytest.raises(UrlBuildError) as exc_info:
            await build_url(target, MatchedPathFactory(repo_identifier="group/proj"), resolver)

        assert isinstance(exc_info.value.cause, ProviderUnavailable)
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_gitlab_with_real_resolver(self, sqlite_cache, sample_projects) -> None:
        target = BackendTarget.default(BackendKind.GITLAB)
        resolver = GitLabResolver(cache=sqlite_cache, provider=StubProjectListing(sample_projects))
        matched = match_path("/Owner/Repo/raw/dev/a.txt", target.kind)

        url = await build_url(target, matched, resolver)
        assert url == "https://gitlab.com/api/v4/projects/7/repository/files/a.txt/raw?ref=dev"

    @pytest.mark.asyncio
    async def test_gitlab_without_resolver(self) -> None:
        target = BackendTarget.default(BackendKind.GITLAB)
        with pytest.raises(UrlBuildError):
            await build_url(target, MatchedPathFactory())


@pytest.mark.unit
class TestGetStrategy:
    """Tests for strategy dispatch."""

    @pytest.mark.parametrize(
        ("kind", "strategy_cls"),
        [
            (BackendKind.GITHUB, GithubStrategy),
            (BackendKind.GITLAB, GitlabStrategy),
            (BackendKind.BITBUCKET, BitbucketStrategy),
        ],
    )
    def test_one_strategy_per_backend(self, kind, strategy_cls) -> None:
        assert isinstance(get_strategy(kind), strategy_cls)
