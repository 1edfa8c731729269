from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from homepage.core.config import Settings, get_settings
from homepage.route.registry import ensure_unique_routes
from homepage.route.routes import build_router


logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    application = FastAPI(title=settings.app_name, version="0.1.0", debug=settings.debug)
    application.include_router(build_router(settings))
    # handlers read settings through Depends(get_settings)
    application.dependency_overrides[get_settings] = lambda: settings
    ensure_unique_routes(application)

    if settings.home_mode == "redirect":
        logger.info("GET / redirects to %s", settings.redirect_url)
    else:
        logger.info("GET / answers with a greeting")
    return application


app = create_application()


def run() -> None:
    settings = get_settings()
    uvicorn.run("homepage.main:app", host=settings.host, port=settings.port)
