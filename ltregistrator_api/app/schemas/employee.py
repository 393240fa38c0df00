"""
Pydantic model for basic employee information.

Employees are created and edited by the account management process;
the API only reads them, so a single read schema is enough.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models import Role
from .project import ProjectRead


class EmployeeRead(BaseModel):
    """Basic information about the employee."""

    employee_id: int
    first_name: str = Field(..., examples=["Ivan"])
    second_name: str = Field(..., examples=["Petrov"])
    mail: str = Field(..., examples=["ivan.petrov@example.com"])
    max_role: Role = Field(..., examples=["Employee"])
    projects: List[ProjectRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
