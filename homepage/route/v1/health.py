from fastapi import APIRouter, Depends

from homepage.core.config import Settings, get_settings


router = APIRouter(tags=["system"])


@router.get("/healthz")  # liveness probe
def healthz(settings: Settings = Depends(get_settings)) -> dict:
    return {"status": "ok", "home_mode": settings.home_mode}
