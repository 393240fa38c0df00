"""Unauthenticated liveness check."""

from typing import Dict

from fastapi import Request

from ..routes import Route, build_router


async def health_check(request: Request) -> Dict[str, str]:
    """Report that the service is running."""
    settings = request.app.state.settings
    return {"status": "ok", "name": settings.project_name, "version": settings.api_version}


ROUTES = [Route("GET", "/", health_check)]

router = build_router(ROUTES)
