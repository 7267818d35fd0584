# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A unit of work owned by a single team member."""
    id: str = Field(..., description="Task id, scoped to the owner's task list")
    name: str = Field(..., description="Short task title")
    description: str = Field(..., description="What the task is about")


class TeamMember(BaseModel):
    """A team member and the ordered list of tasks they own."""
    id: str = Field(..., description="Member id (primary key)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")
    tasks: list[Task] = Field(default_factory=list, description="Owned tasks, in order")
