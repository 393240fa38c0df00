"""
Domain records returned by the data-access services.

These are storage-side representations.  They never leave the server
as they are; ``mapping.py`` converts them into the pydantic transfer
objects defined in ``schemas``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Highest role an employee holds; reported as ``max_role``."""

    EMPLOYEE = "Employee"
    MANAGER = "Manager"
    ADMINISTRATOR = "Administrator"


class LeaveType(str, Enum):
    SICK_LEAVE = "SickLeave"
    VACATION = "Vacation"
    TRAINING = "Training"
    IDLE = "Idle"


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class Project:
    id: int
    name: str


@dataclass(frozen=True)
class Leave:
    id: Optional[int]
    employee_id: Optional[int]
    type_leave: LeaveType
    start_date: date
    end_date: date
    # None on an update means "keep the stored status".
    status: Optional[LeaveStatus] = LeaveStatus.PENDING


@dataclass(frozen=True)
class Employee:
    id: int
    first_name: str
    second_name: str
    mail: str
    max_role: Role
    projects: list[Project] = field(default_factory=list)
    leaves: list[Leave] = field(default_factory=list)
