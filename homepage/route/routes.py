from fastapi import APIRouter

from homepage.core.config import Settings

from .v1 import health
from .v1.home import build_home_router


def build_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(health.router)
    router.include_router(build_home_router(settings.home_mode))
    return router
