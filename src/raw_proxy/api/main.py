"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from raw_proxy import __version__
from raw_proxy.api.routers import health, raw
from raw_proxy.config import get_settings
from raw_proxy.config.logging import configure_logging
from raw_proxy.core.exceptions import RawProxyError

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )
    logger.info("raw-proxy starting", backend=settings.backend.value)

    # Services are lazily initialized on first request via dependencies

    yield

    # Cleanup
    if hasattr(app.state, "http_client"):
        await app.state.http_client.aclose()
    if hasattr(app.state, "repo_factory"):
        await app.state.repo_factory.close()


async def handle_proxy_error(request: Request, exc: RawProxyError) -> PlainTextResponse:
    """Render domain errors as a short plain-text reason."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "Request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        error=exc.message,
    )
    return PlainTextResponse(exc.reason, status_code=exc.status_code)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="raw-proxy",
        description="Raw-file reverse proxy for GitHub, GitLab and Bitbucket",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_exception_handler(RawProxyError, handle_proxy_error)

    # Health first: the raw router catches every other path
    app.include_router(health.router, tags=["Health"])
    app.include_router(raw.router, tags=["Raw"])

    return app


# Create default app instance
app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "raw_proxy.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        workers=settings.api_workers,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
