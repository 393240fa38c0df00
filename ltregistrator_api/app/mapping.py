"""
Conversions between domain records and transfer objects.

One function per direction and type; nothing here inspects attributes
dynamically, so a renamed field shows up as an error at the call site.
"""

from typing import Iterable, List

from .models import Employee, Leave, Project
from .schemas.employee import EmployeeRead
from .schemas.leave import LeaveInput, LeaveRead, LeaveUpdate
from .schemas.project import ProjectRead


def project_to_dto(project: Project) -> ProjectRead:
    return ProjectRead(id=project.id, name=project.name)


def leave_to_dto(leave: Leave) -> LeaveRead:
    return LeaveRead(
        id=leave.id,
        employee_id=leave.employee_id,
        type_leave=leave.type_leave,
        start_date=leave.start_date,
        end_date=leave.end_date,
        status=leave.status,
    )


def leaves_to_dto(leaves: Iterable[Leave]) -> List[LeaveRead]:
    return [leave_to_dto(leave) for leave in leaves]


def employee_to_dto(employee: Employee) -> EmployeeRead:
    return EmployeeRead(
        employee_id=employee.id,
        first_name=employee.first_name,
        second_name=employee.second_name,
        mail=employee.mail,
        max_role=employee.max_role,
        projects=[project_to_dto(p) for p in employee.projects],
    )


def leave_input_to_record(item: LeaveInput) -> Leave:
    """New leaves have no id or owner yet; the service assigns both."""
    return Leave(
        id=None,
        employee_id=None,
        type_leave=item.type_leave,
        start_date=item.start_date,
        end_date=item.end_date,
    )


def leave_update_to_record(item: LeaveUpdate) -> Leave:
    return Leave(
        id=item.id,
        employee_id=None,
        type_leave=item.type_leave,
        start_date=item.start_date,
        end_date=item.end_date,
        status=item.status,
    )
