"""Raw-file proxy endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from raw_proxy.api.dependencies import ProxyServiceDep

router = APIRouter()


@router.get("/{path:path}", response_class=PlainTextResponse)
async def get_raw_file(
    path: str,
    request: Request,
    service: ProxyServiceDep,
) -> str:
    """Proxy a raw file from the configured backend.

    ``?token=`` unlocks backend credentials, ``?type=adguardhome``
    rewrites the body into AdGuard Home rules.
    """
    return await service.fetch(path, request.query_params.multi_items())


@router.api_route(
    "/{path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def method_not_allowed(path: str) -> PlainTextResponse:
    """Only GET is proxied."""
    return PlainTextResponse(
        "Method Not Allowed",
        status_code=405,
        headers={"Allow": "GET"},
    )
