"""
Main entrypoint for the LTRegistrator API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so it
can be served with uvicorn, e.g.::

    uvicorn ltregistrator_api.app.main:app --reload

The data-access services are created here and stored on ``app.state``;
tests pass their own services or settings to ``create_app``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging
from .services.employee_service import EmployeeService
from .services.project_service import ProjectService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    employee_service: Optional[EmployeeService] = None,
    project_service: Optional[ProjectService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    employee_service, project_service : optional
        Data-access services.  When omitted they are built on the
        SQLite database named by ``settings.database_url``, and the
        schema is migrated on startup.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    database_path = get_database_path(settings.database_url)
    app.state.employee_service = employee_service or EmployeeService(database_path)
    app.state.project_service = project_service or ProjectService(database_path)
    # Only migrate storage this app created itself.
    owns_database = employee_service is None or project_service is None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON or a non-numeric id in the path is a bad request.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        if owns_database:
            init_db(database_path)
            logger.info("Database ready at %s", database_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
