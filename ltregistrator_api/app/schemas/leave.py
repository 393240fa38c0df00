"""
Pydantic models for leave data.

``LeaveInput`` is the body item for creating leaves, ``LeaveUpdate``
the body item for changing existing ones and ``LeaveRead`` the shape
returned to clients.  Input models reject unknown fields and inverted
date ranges.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import LeaveStatus, LeaveType


class LeaveBase(BaseModel):
    type_leave: LeaveType = Field(..., examples=["Vacation"])
    start_date: date = Field(..., examples=["2024-07-01"])
    end_date: date = Field(..., examples=["2024-07-14"])

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be earlier than start_date")
        return self


class LeaveInput(LeaveBase):
    """Schema for a leave being added to an employee."""

    model_config = ConfigDict(extra="forbid")


class LeaveUpdate(LeaveBase):
    """Schema for changing an existing leave.

    ``id`` must refer to a leave of the employee named in the path.
    When ``status`` is omitted the stored status is kept.
    """

    id: int = Field(..., gt=0, examples=[101])
    status: Optional[LeaveStatus] = Field(None, examples=["Approved"])

    model_config = ConfigDict(extra="forbid")


class LeaveRead(LeaveBase):
    """Schema for reading a leave from the API."""

    id: int
    employee_id: int
    status: LeaveStatus

    model_config = ConfigDict(from_attributes=True)
