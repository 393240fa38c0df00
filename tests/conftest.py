import asyncio
from datetime import date

import pytest
from fastapi.testclient import TestClient

from ltregistrator_api.app.core.config import Settings
from ltregistrator_api.app.core.db import init_db
from ltregistrator_api.app.core.security import create_access_token
from ltregistrator_api.app.main import create_app
from ltregistrator_api.app.models import Leave, LeaveType, Role
from ltregistrator_api.app.services.employee_service import EmployeeService
from ltregistrator_api.app.services.project_service import ProjectService

SECRET = "test-secret"


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "test.db")
    init_db(path)
    return path


@pytest.fixture
def settings(db_path):
    return Settings(database_url=db_path, secret_key=SECRET, log_level="WARNING")


@pytest.fixture
def employee_service(db_path):
    return EmployeeService(db_path)


@pytest.fixture
def project_service(db_path):
    return ProjectService(db_path)


@pytest.fixture
def seeded(employee_service, project_service):
    """Two plain employees, a manager and one leave owned by ``bob``."""

    async def _seed():
        portal = await project_service.create_project("Timesheet Portal")
        payroll = await project_service.create_project("Payroll Integration")
        alice = await employee_service.create_employee("Alice", "Ivanova", "alice@example.com")
        bob = await employee_service.create_employee("Bob", "Petrov", "bob@example.com")
        manager = await employee_service.create_employee("Maria", "Orlova", "maria@example.com", Role.MANAGER)
        await employee_service.assign_project(alice, portal)
        await employee_service.assign_project(alice, payroll)
        [bob_leave] = await employee_service.add_leaves(
            bob,
            [Leave(id=None, employee_id=None, type_leave=LeaveType.VACATION,
                   start_date=date(2024, 7, 1), end_date=date(2024, 7, 14))],
        )
        return {
            "alice": alice,
            "bob": bob,
            "manager": manager,
            "bob_leave": bob_leave,
            "portal": portal,
            "payroll": payroll,
        }

    return asyncio.run(_seed())


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings=settings)) as c:
        yield c


def make_token(employee_id, role=Role.EMPLOYEE):
    return create_access_token({"sub": str(employee_id), "role": Role(role).value}, secret_key=SECRET)


def auth(employee_id, role=Role.EMPLOYEE):
    return {"Authorization": f"Bearer {make_token(employee_id, role)}"}
