"""
Data access for employees and their leaves.

``EmployeeService`` reads employees together with their projects and
leaves, and applies batches of leave changes.  Each batch runs in one
SQLite transaction: every target is checked first, and if any check
fails nothing is written.  Failures are reported with the exceptions
from ``core.exceptions``:

* ``NotFoundError`` - the employee or one of the leave ids is unknown;
* ``ForbiddenError`` - a leave belongs to a different employee.
"""

import logging
import sqlite3
from datetime import date
from typing import Iterable, List, Sequence

from ..core.db import fits_integer_column, get_connection, get_cursor
from ..core.exceptions import ForbiddenError, NotFoundError
from ..models import Employee, Leave, LeaveStatus, LeaveType, Project, Role

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found"
FOREIGN_LEAVE = "You cannot change another employee's leave"


def _row_to_leave(row: sqlite3.Row) -> Leave:
    return Leave(
        id=row["id"],
        employee_id=row["employee_id"],
        type_leave=LeaveType(row["type_leave"]),
        start_date=date.fromisoformat(row["start_date"]),
        end_date=date.fromisoformat(row["end_date"]),
        status=LeaveStatus(row["status"]),
    )


class EmployeeService:
    """SQLite-backed employee and leave storage."""

    def __init__(self, database_path: str):
        self.database_path = database_path

    @staticmethod
    def _ensure_employee(cursor: sqlite3.Cursor, employee_id: int) -> None:
        row = None
        if fits_integer_column(employee_id):
            row = cursor.execute("SELECT id FROM employees WHERE id = ?", (employee_id,)).fetchone()
        if not row:
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError(EMPLOYEE_NOT_FOUND)

    @staticmethod
    def _check_owned_leaves(cursor: sqlite3.Cursor, employee_id: int, leave_ids: Iterable[int]) -> None:
        for leave_id in leave_ids:
            row = None
            if fits_integer_column(leave_id):
                row = cursor.execute("SELECT employee_id FROM leaves WHERE id = ?", (leave_id,)).fetchone()
            if not row:
                logger.warning("Leave %s not found", leave_id)
                raise NotFoundError(f"Leave {leave_id} not found")
            if row["employee_id"] != employee_id:
                logger.warning(
                    "Employee %s tried to change leave %s of employee %s",
                    employee_id,
                    leave_id,
                    row["employee_id"],
                )
                raise ForbiddenError(FOREIGN_LEAVE)

    async def get_by_id(self, employee_id: int) -> Employee:
        """Return the employee with projects and leaves, or raise ``NotFoundError``."""
        if not fits_integer_column(employee_id):
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError(EMPLOYEE_NOT_FOUND)
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT id, first_name, second_name, mail, max_role FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
            if not row:
                logger.warning("Employee %s not found", employee_id)
                raise NotFoundError(EMPLOYEE_NOT_FOUND)
            project_rows = cursor.execute(
                """
                SELECT p.id, p.name FROM projects p
                JOIN employee_projects ep ON ep.project_id = p.id
                WHERE ep.employee_id = ?
                ORDER BY p.id
                """,
                (employee_id,),
            ).fetchall()
            leave_rows = cursor.execute(
                "SELECT id, employee_id, type_leave, start_date, end_date, status "
                "FROM leaves WHERE employee_id = ? ORDER BY id",
                (employee_id,),
            ).fetchall()
            return Employee(
                id=row["id"],
                first_name=row["first_name"],
                second_name=row["second_name"],
                mail=row["mail"],
                max_role=Role(row["max_role"]),
                projects=[Project(id=r["id"], name=r["name"]) for r in project_rows],
                leaves=[_row_to_leave(r) for r in leave_rows],
            )
        finally:
            conn.close()

    async def add_leaves(self, employee_id: int, leaves: Sequence[Leave]) -> List[int]:
        """Append leaves to an employee and return their new ids.

        Ids and owners on the incoming records are ignored; new leaves
        always start as ``Pending``.
        """
        new_ids: List[int] = []
        with get_cursor(self.database_path) as cursor:
            self._ensure_employee(cursor, employee_id)
            for leave in leaves:
                cursor.execute(
                    "INSERT INTO leaves (employee_id, type_leave, start_date, end_date, status) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (
                        employee_id,
                        LeaveType(leave.type_leave).value,
                        leave.start_date.isoformat(),
                        leave.end_date.isoformat(),
                        LeaveStatus.PENDING.value,
                    ),
                )
                new_ids.append(cursor.lastrowid)
        logger.info("Added %d leave(s) for employee %s", len(new_ids), employee_id)
        return new_ids

    async def update_leaves(self, employee_id: int, leaves: Sequence[Leave]) -> None:
        """Overwrite existing leaves of an employee by id.

        A record whose ``status`` is ``None`` keeps its stored status.
        """
        with get_cursor(self.database_path) as cursor:
            self._ensure_employee(cursor, employee_id)
            self._check_owned_leaves(cursor, employee_id, (leave.id for leave in leaves))
            for leave in leaves:
                cursor.execute(
                    """
                    UPDATE leaves
                    SET type_leave = ?, start_date = ?, end_date = ?,
                        status = COALESCE(?, status), updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                    """,
                    (
                        LeaveType(leave.type_leave).value,
                        leave.start_date.isoformat(),
                        leave.end_date.isoformat(),
                        LeaveStatus(leave.status).value if leave.status is not None else None,
                        leave.id,
                    ),
                )
        logger.info("Updated %d leave(s) for employee %s", len(leaves), employee_id)

    async def delete_leaves(self, employee_id: int, leave_ids: Sequence[int]) -> None:
        """Delete leaves of an employee; all of them or none."""
        unique_ids = list(dict.fromkeys(leave_ids))
        with get_cursor(self.database_path) as cursor:
            self._ensure_employee(cursor, employee_id)
            self._check_owned_leaves(cursor, employee_id, unique_ids)
            cursor.executemany("DELETE FROM leaves WHERE id = ?", [(i,) for i in unique_ids])
        logger.info("Deleted leave(s) %s of employee %s", unique_ids, employee_id)

    async def create_employee(
        self,
        first_name: str,
        second_name: str,
        mail: str,
        max_role: Role = Role.EMPLOYEE,
    ) -> int:
        """Insert an employee record.  Used by the seeding script and tests."""
        with get_cursor(self.database_path) as cursor:
            cursor.execute(
                "INSERT INTO employees (first_name, second_name, mail, max_role) VALUES (?, ?, ?, ?)",
                (first_name, second_name, mail.strip().lower(), Role(max_role).value),
            )
            employee_id = cursor.lastrowid
        logger.info("Employee %s created (%s)", employee_id, mail)
        return employee_id

    async def assign_project(self, employee_id: int, project_id: int) -> None:
        with get_cursor(self.database_path) as cursor:
            self._ensure_employee(cursor, employee_id)
            row = None
            if fits_integer_column(project_id):
                row = cursor.execute("SELECT id FROM projects WHERE id = ?", (project_id,)).fetchone()
            if not row:
                raise NotFoundError("Project not found")
            cursor.execute(
                "INSERT OR IGNORE INTO employee_projects (employee_id, project_id) VALUES (?, ?)",
                (employee_id, project_id),
            )
        logger.info("Assigned project %s to employee %s", project_id, employee_id)
