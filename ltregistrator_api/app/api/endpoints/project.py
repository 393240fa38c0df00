"""
Project endpoints.

Projects are referenced by employees and are not edited through the
API; clients can list them and look one up by id.
"""

from typing import Any, Dict, List

from fastapi import Depends, HTTPException

from ...core.exceptions import ServiceError
from ...core.security import get_current_user
from ...mapping import project_to_dto
from ...schemas.project import ProjectRead
from ...services.project_service import ProjectService
from ..deps import get_project_service
from ..routes import Route, build_router


async def list_projects(
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRead]:
    """List all projects."""
    return [project_to_dto(p) for p in await service.list_projects()]


async def get_project(
    project_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Get a single project by id."""
    try:
        project = await service.get_project(project_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail) from e
    return project_to_dto(project)


ROUTES = [
    Route("GET", "/", list_projects, List[ProjectRead], {401: {"description": "Not authenticated"}}),
    Route(
        "GET",
        "/{project_id}",
        get_project,
        ProjectRead,
        {401: {"description": "Not authenticated"}, 404: {"description": "Project not found"}},
    ),
]

router = build_router(ROUTES)
