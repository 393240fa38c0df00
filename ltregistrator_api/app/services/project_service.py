"""Data access for projects."""

import logging
from typing import List

from ..core.db import fits_integer_column, get_connection, get_cursor
from ..core.exceptions import NotFoundError
from ..models import Project

logger = logging.getLogger(__name__)


class ProjectService:
    """SQLite-backed, read-mostly project storage."""

    def __init__(self, database_path: str):
        self.database_path = database_path

    async def list_projects(self) -> List[Project]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute("SELECT id, name FROM projects ORDER BY id").fetchall()
            return [Project(id=row["id"], name=row["name"]) for row in rows]
        finally:
            conn.close()

    async def get_project(self, project_id: int) -> Project:
        if not fits_integer_column(project_id):
            raise NotFoundError("Project not found")
        conn = get_connection(self.database_path)
        try:
            row = conn.execute("SELECT id, name FROM projects WHERE id = ?", (project_id,)).fetchone()
            if not row:
                logger.warning("Project %s not found", project_id)
                raise NotFoundError("Project not found")
            return Project(id=row["id"], name=row["name"])
        finally:
            conn.close()

    async def create_project(self, name: str) -> int:
        with get_cursor(self.database_path) as cursor:
            cursor.execute("INSERT INTO projects (name) VALUES (?)", (name,))
            project_id = cursor.lastrowid
        logger.info("Project %s created (%s)", project_id, name)
        return project_id
