"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from raw_proxy.core.models.backend import BackendCredentials, BackendKind, BackendTarget


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1

    # --- Backend selection ---
    backend: BackendKind = BackendKind.GITHUB

    github_base_url: str = "https://raw.githubusercontent.com"
    gitlab_base_url: str = "https://gitlab.com"
    bitbucket_base_url: str = "https://bitbucket.org"

    # Shared secret a caller passes as ?token= to unlock credential injection
    proxy_token: str | None = None

    # --- Backend credentials ---
    github_token: str | None = None
    gitlab_token: str | None = None
    bitbucket_username: str | None = None
    bitbucket_app_password: str | None = None

    # --- GitLab directory cache ---
    directory_cache_store: str = "sqlite"  # "sqlite" | "redis"

    # SQLite
    sqlite_path: str = "~/.raw-proxy/cache.db"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    cache_namespace: str = "RAW_SERVICE_KV"
    cache_key: str = "REPO_LIST_KEY"

    # GitLab project listing (single page, no pagination)
    gitlab_projects_per_page: int = 100

    # Outbound HTTP
    http_timeout: float = 30.0

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.sqlite_path = str(Path(self.sqlite_path).expanduser())

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def backend_target(self) -> BackendTarget:
        base_urls = {
            BackendKind.GITHUB: self.github_base_url,
            BackendKind.GITLAB: self.gitlab_base_url,
            BackendKind.BITBUCKET: self.bitbucket_base_url,
        }
        return BackendTarget(kind=self.backend, base_url=base_urls[self.backend])

    @property
    def credentials(self) -> BackendCredentials:
        return BackendCredentials(
            github_token=self.github_token,
            gitlab_token=self.gitlab_token,
            bitbucket_username=self.bitbucket_username,
            bitbucket_app_password=self.bitbucket_app_password,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
