"""Pydantic model for projects referenced by employees."""

from pydantic import BaseModel, ConfigDict, Field


class ProjectRead(BaseModel):
    id: int
    name: str = Field(..., examples=["Timesheet Portal"])

    model_config = ConfigDict(from_attributes=True)
