"""CLI for raw-proxy."""

import asyncio
import sys

import click
import structlog

from raw_proxy.config.logging import configure_logging
from raw_proxy.core.exceptions import RawProxyError

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


async def _create_service(settings=None):
    """Create the proxy service with its HTTP client and repository factory."""
    import httpx

    from raw_proxy.api.dependencies import create_proxy_service
    from raw_proxy.config.settings import get_settings
    from raw_proxy.repositories.factory import RepositoryFactory

    if settings is None:
        settings = get_settings()

    client = httpx.AsyncClient(timeout=settings.http_timeout)
    factory = RepositoryFactory(settings)
    service = await create_proxy_service(settings, client, factory)
    return service, client, factory


async def _close(client, factory) -> None:
    await client.aclose()
    await factory.close()


def _report(error: RawProxyError) -> int:
    click.echo(f"Error: {error.reason} ({error.message})", err=True)
    return 1


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """raw-proxy: raw-file reverse proxy for GitHub, GitLab and Bitbucket."""
    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)


@cli.command()
def serve() -> None:
    """Run the HTTP server."""
    from raw_proxy.api.main import run

    run()


@cli.command()
@click.argument("path")
def url(path: str) -> None:
    """Print the upstream URL an inbound PATH is proxied to."""

    async def _url():
        service, client, factory = await _create_service()
        try:
            click.echo(await service.upstream_url(path))
        except RawProxyError as e:
            return _report(e)
        finally:
            await _close(client, factory)

    sys.exit(run_async(_url()))


@cli.command()
@click.argument("owner_repo")
def resolve(owner_repo: str) -> None:
    """Resolve a GitLab OWNER_REPO (namespace/repo) to its project id."""

    async def _resolve():
        import httpx

        from raw_proxy.api.dependencies import create_gitlab_resolver
        from raw_proxy.config.settings import get_settings
        from raw_proxy.repositories.factory import RepositoryFactory

        settings = get_settings()
        client = httpx.AsyncClient(timeout=settings.http_timeout)
        factory = RepositoryFactory(settings)
        try:
            resolver = await create_gitlab_resolver(settings, client, factory)
            click.echo(await resolver.resolve(owner_repo))
        except RawProxyError as e:
            return _report(e)
        finally:
            await _close(client, factory)

    sys.exit(run_async(_resolve()))


@cli.command()
@click.argument("path")
@click.option("--token", "-t", default=None, help="Shared secret unlocking backend credentials")
@click.option("--type", "format_type", default=None, help="Output format (e.g. adguardhome)")
def fetch(path: str, token: str | None, format_type: str | None) -> None:
    """Fetch PATH through the proxy and print the body."""
    query = []
    if token:
        query.append(("token", token))
    if format_type:
        query.append(("type", format_type))

    async def _fetch():
        service, client, factory = await _create_service()
        try:
            click.echo(await service.fetch(path, query))
        except RawProxyError as e:
            return _report(e)
        finally:
            await _close(client, factory)

    sys.exit(run_async(_fetch()))


if __name__ == "__main__":
    cli()
