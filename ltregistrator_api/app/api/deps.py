"""
FastAPI dependencies that hand the data-access services to the routes.

The services are created by ``main.create_app`` and stored on
``app.state``; the routes never construct them themselves.
"""

from fastapi import Request

from ..services.employee_service import EmployeeService
from ..services.project_service import ProjectService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def get_project_service(request: Request) -> ProjectService:
    return request.app.state.project_service
