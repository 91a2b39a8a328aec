"""FastAPI dependencies for dependency injection."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from raw_proxy.config import Settings, get_settings
from raw_proxy.core.models.backend import BackendKind
from raw_proxy.git.credentials import CredentialInjector
from raw_proxy.git.gitlab_api import GitLabProjectsClient
from raw_proxy.repositories.factory import RepositoryFactory
from raw_proxy.services.proxy import RawProxyService
from raw_proxy.services.resolution import GitLabResolver


def get_settings_dep() -> Settings:
    """Get application settings."""
    return get_settings()


async def get_proxy_service(request: Request) -> RawProxyService:
    """Get the proxy service from app state."""
    if hasattr(request.app.state, "proxy_service"):
        return request.app.state.proxy_service

    # Initialize on first request
    settings = get_settings()
    client = httpx.AsyncClient(timeout=settings.http_timeout)
    factory = RepositoryFactory(settings)
    service = await create_proxy_service(settings, client, factory)

    request.app.state.http_client = client
    request.app.state.repo_factory = factory
    request.app.state.proxy_service = service
    return service


async def create_proxy_service(
    settings: Settings,
    client: httpx.AsyncClient,
    factory: RepositoryFactory,
) -> RawProxyService:
    """Create the proxy service for the configured backend.

    The directory cache is only opened when the backend is GitLab.
    """
    target = settings.backend_target

    resolver = None
    if target.kind == BackendKind.GITLAB:
        resolver = await create_gitlab_resolver(settings, client, factory)

    return RawProxyService(
        target=target,
        client=client,
        injector=CredentialInjector(settings.credentials),
        resolver=resolver,
        secret=settings.proxy_token,
    )


async def create_gitlab_resolver(
    settings: Settings,
    client: httpx.AsyncClient,
    factory: RepositoryFactory,
) -> GitLabResolver:
    """Create the GitLab resolver over the configured directory cache."""
    cache = await factory.get_directory_cache()
    provider = GitLabProjectsClient(
        client=client,
        base_url=settings.gitlab_base_url,
        token=settings.gitlab_token,
        per_page=settings.gitlab_projects_per_page,
    )
    return GitLabResolver(cache=cache, provider=provider)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
ProxyServiceDep = Annotated[RawProxyService, Depends(get_proxy_service)]
