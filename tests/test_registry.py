import pytest
from fastapi import APIRouter, FastAPI

import homepage.main
from homepage.core.config import Settings
from homepage.main import create_application
from homepage.route.registry import (
    DuplicateRouteError,
    ensure_unique_routes,
    find_duplicate_routes,
)
from homepage.route.v1.home import build_home_router


def test_application_routes_are_unique():
    app = create_application(Settings(home_mode='greeting'))
    assert find_duplicate_routes(app.routes) == []


def test_both_home_definitions_collide():
    app = FastAPI()
    app.include_router(build_home_router('redirect'))
    app.include_router(build_home_router('greeting'))

    assert find_duplicate_routes(app.routes) == [('GET', '/'), ('HEAD', '/')]
    with pytest.raises(DuplicateRouteError) as exc:
        ensure_unique_routes(app)
    assert exc.value.duplicates == [('GET', '/'), ('HEAD', '/')]
    assert 'GET /' in str(exc.value)


def test_create_application_refuses_both_home_definitions(monkeypatch):
    def build_both(settings):
        router = APIRouter()
        router.include_router(build_home_router('redirect'))
        router.include_router(build_home_router('greeting'))
        return router

    monkeypatch.setattr(homepage.main, 'build_router', build_both)
    with pytest.raises(DuplicateRouteError) as exc:
        create_application(Settings())
    assert ('GET', '/') in exc.value.duplicates


def test_parameter_names_do_not_hide_collision():
    app = FastAPI()

    @app.get('/items/{id}')
    def by_id(id: int):
        return {}

    @app.get('/items/{item_id}')
    def by_item_id(item_id: int):
        return {}

    assert find_duplicate_routes(app.routes) == [('GET', '/items/{id}')]


def test_same_path_different_method_is_fine():
    app = FastAPI()

    @app.get('/items')
    def list_items():
        return []

    @app.post('/items')
    def add_item():
        return {}

    ensure_unique_routes(app)


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        build_home_router('both')
