"""
Route tables.

Endpoint modules describe their routes as a list of ``Route`` entries
(method, path, handler, response model, documented error codes) and
turn the list into an ``APIRouter`` with ``build_router``.  Keeping
the table in one place makes the HTTP surface of a module readable at
a glance.
"""

from typing import Any, Callable, Dict, List, NamedTuple, Optional

from fastapi import APIRouter


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    response_model: Optional[Any] = None
    responses: Optional[Dict[int, Dict[str, Any]]] = None


def build_router(routes: List[Route]) -> APIRouter:
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            responses=route.responses,
            summary=(route.endpoint.__doc__ or "").strip().split("\n")[0] or None,
        )
    return router
