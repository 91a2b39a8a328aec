"""Inbound path matching for raw-file requests.

Paths are split into ``/``-separated segments and read left to right:

- GitHub / Bitbucket: ``/{owner}/{repo}/[raw/]{branch}/{file...}``
- GitLab: ``/{owner}/{repo}/[-/]raw/{branch}/{file...}``

The first two segments form the repository identifier (lowercased), the
anchor tokens are compared literally, the next segment is the branch and
everything after it is the file path. Anchor-like segments inside the file
path are therefore never taken for anchors.
"""

from raw_proxy.core.exceptions import PathParseError
from raw_proxy.core.models.backend import BackendKind
from raw_proxy.core.models.path import MatchedPath

RAW_ANCHOR = "raw"
GITLAB_SEPARATOR = "-"


def _split(path: str) -> list[str]:
    return path[1:].split("/") if path.startswith("/") else path.split("/")


def _build(owner: str, repo: str, branch: str, rest: list[str], path: str) -> MatchedPath:
    file_path = "/".join(rest)
    if not owner or not repo or not branch or not file_path:
        raise PathParseError(f"Incomplete path: {path}")
    return MatchedPath(
        repo_identifier=f"{owner}/{repo}".lower(),
        branch=branch,
        file_path=file_path,
    )


def match_github_path(path: str) -> MatchedPath:
    """Match ``/{owner}/{repo}/[raw/]{branch}/{file...}``.

    The ``raw`` anchor is only consumed when a branch and a file still
    follow it; otherwise it is read as the branch name.
    """
    segments = _split(path)
    if len(segments) < 4:
        raise PathParseError(f"Path too short: {path}")

    owner, repo, *rest = segments
    if rest[0] == RAW_ANCHOR and len(rest) >= 3:
        rest = rest[1:]
    return _build(owner, repo, rest[0], rest[1:], path)


# Bitbucket shares GitHub's inbound path scheme.
match_bitbucket_path = match_github_path


def match_gitlab_path(path: str) -> MatchedPath:
    """Match ``/{owner}/{repo}/[-/]raw/{branch}/{file...}``."""
    segments = _split(path)
    if len(segments) < 4:
        raise PathParseError(f"Path too short: {path}")

    owner, repo, *rest = segments
    if rest[0] == GITLAB_SEPARATOR:
        rest = rest[1:]
    if rest[0] != RAW_ANCHOR:
        raise PathParseError(f"Missing '{RAW_ANCHOR}' anchor: {path}")
    rest = rest[1:]
    if len(rest) < 2:
        raise PathParseError(f"Path too short: {path}")
    return _build(owner, repo, rest[0], rest[1:], path)


_MATCHERS = {
    BackendKind.GITHUB: match_github_path,
    BackendKind.GITLAB: match_gitlab_path,
    BackendKind.BITBUCKET: match_bitbucket_path,
}


def match_path(path: str, kind: BackendKind) -> MatchedPath:
    """Extract repo identifier, branch and file path for the given backend."""
    return _MATCHERS[kind](path)
