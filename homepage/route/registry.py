"""Startup guard against two handlers claiming the same method and path.

Starlette dispatches to the first matching route, so a second registration of
``GET /`` would otherwise be shadowed without any warning.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List, Tuple

from fastapi import FastAPI
from starlette.routing import BaseRoute


logger = logging.getLogger(__name__)

_PARAM_RE = re.compile(r"\{[^}:]+(:[^}]+)?\}")


class DuplicateRouteError(RuntimeError):
    def __init__(self, duplicates: List[Tuple[str, str]]):
        self.duplicates = duplicates
        listed = ", ".join(f"{method} {path}" for method, path in duplicates)
        super().__init__(f"route declared more than once: {listed}")


def _iter_endpoints(routes: Iterable[BaseRoute]) -> Iterator[BaseRoute]:
    for route in routes:
        if getattr(route, "methods", None) and getattr(route, "path", None) is not None:
            yield route
            continue
        # included routers that are kept as a single entry instead of flattened
        if getattr(route, "path", None) is None:
            nested = getattr(route, "routes", None)
            if nested is None:
                nested = getattr(getattr(route, "router", None), "routes", None)
            if nested:
                yield from _iter_endpoints(nested)


def find_duplicate_routes(routes: Iterable[BaseRoute]) -> List[Tuple[str, str]]:
    # paths differing only in parameter names match the same requests
    first_path = {}
    duplicates: List[Tuple[str, str]] = []
    for route in _iter_endpoints(routes):
        pattern = _PARAM_RE.sub(lambda m: "{" + (m.group(1) or "") + "}", route.path)
        for method in sorted(route.methods):
            key = (method, pattern)
            if key in first_path:
                found = (method, first_path[key])
                if found not in duplicates:
                    duplicates.append(found)
            else:
                first_path[key] = route.path
    return duplicates


def ensure_unique_routes(app: FastAPI) -> None:
    duplicates = find_duplicate_routes(app.routes)
    if duplicates:
        logger.error("refusing to start, %d colliding route(s)", len(duplicates))
        raise DuplicateRouteError(duplicates)
