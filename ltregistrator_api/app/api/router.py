"""
Top-level API router.

Aggregates the resource routers under ``/api``.  When a new resource
is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import employee, project

router = APIRouter()

router.include_router(employee.router, prefix="/employee", tags=["employee"])
router.include_router(project.router, prefix="/project", tags=["project"])
