"""Tests for application settings."""

import pytest

from raw_proxy.config.settings import Settings
from raw_proxy.core.models.backend import BackendKind


@pytest.mark.unit
class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.directory_cache_store == "sqlite"
        assert settings.cache_namespace == "RAW_SERVICE_KV"
        assert settings.cache_key == "REPO_LIST_KEY"
        assert not settings.sqlite_path.startswith("~")

    def test_backend_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BACKEND", "gitlab")
        monkeypatch.setenv("GITLAB_BASE_URL", "https://git.example.com/")
        settings = Settings(_env_file=None)

        target = settings.backend_target
        assert target.kind == BackendKind.GITLAB
        assert target.base_url == "https://git.example.com"

    def test_credentials(self) -> None:
        settings = Settings(
            _env_file=None,
            github_token="gh",
            bitbucket_username="alice",
            bitbucket_app_password="pw",
        )
        creds = settings.credentials
        assert creds.github_token == "gh"
        assert creds.gitlab_token is None
        assert creds.bitbucket_username == "alice"

    def test_environment_flags(self) -> None:
        assert Settings(_env_file=None, environment="production").is_production
        assert Settings(_env_file=None, environment="development").is_development
