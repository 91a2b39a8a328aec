"""Backend path matching, URL building and credentials."""

from raw_proxy.git.credentials import CredentialInjector
from raw_proxy.git.gitlab_api import GitLabProjectsClient
from raw_proxy.git.path_matcher import match_path
from raw_proxy.git.url_resolver import BackendStrategy, build_url, get_strategy

__all__ = [
    "BackendStrategy",
    "CredentialInjector",
    "GitLabProjectsClient",
    "build_url",
    "get_strategy",
    "match_path",
]
