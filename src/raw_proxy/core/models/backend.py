"""Backend selection and credential models."""

from enum import Enum

from pydantic import BaseModel, field_validator


class BackendKind(str, Enum):
    """Supported source-code hosting providers."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    @property
    def display_name(self) -> str:
        return {
            BackendKind.GITHUB: "Github",
            BackendKind.GITLAB: "GitLab",
            BackendKind.BITBUCKET: "Bitbucket",
        }[self]


DEFAULT_BASE_URLS: dict[BackendKind, str] = {
    BackendKind.GITHUB: "https://raw.githubusercontent.com",
    BackendKind.GITLAB: "https://gitlab.com",
    BackendKind.BITBUCKET: "https://bitbucket.org",
}


class BackendTarget(BaseModel):
    """The backend requests are proxied to, with its base URL."""

    kind: BackendKind
    base_url: str

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def default(cls, kind: BackendKind) -> "BackendTarget":
        return cls(kind=kind, base_url=DEFAULT_BASE_URLS[kind])

    class Config:
        frozen = True


class BackendCredentials(BaseModel):
    """Long-lived static credentials, one set per backend."""

    github_token: str | None = None
    gitlab_token: str | None = None
    bitbucket_username: str | None = None
    bitbucket_app_password: str | None = None

    class Config:
        frozen = True
