from __future__ import annotations

from typing import get_args

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from homepage.core.config import HomeMode, Settings, get_settings


HOME_MODES = get_args(HomeMode)


def redirect_home(settings: Settings = Depends(get_settings)) -> RedirectResponse:
    return RedirectResponse(url=settings.redirect_url, status_code=303)


def greet_home(settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    return PlainTextResponse(settings.greeting)


def build_home_router(mode: str) -> APIRouter:
    """Router with the single active definition of ``GET /``.

    Both handlers answer the same path, so only one of them may be mounted.
    HEAD is served alongside GET with the same status and headers.
    """
    if mode not in HOME_MODES:
        raise ValueError(f"unknown home mode {mode!r}, expected one of {HOME_MODES}")

    router = APIRouter(tags=["home"])
    if mode == "redirect":
        router.add_api_route(
            "/", redirect_home, methods=["GET", "HEAD"], response_class=RedirectResponse, status_code=303
        )
    else:
        router.add_api_route(
            "/", greet_home, methods=["GET", "HEAD"], response_class=PlainTextResponse
        )
    return router
