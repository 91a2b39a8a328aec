"""Health check endpoint."""

from fastapi import APIRouter

from raw_proxy.api.dependencies import SettingsDep

router = APIRouter()


@router.get("/healthz")
async def health(settings: SettingsDep) -> dict[str, str]:
    return {"status": "ok", "backend": settings.backend.value}
