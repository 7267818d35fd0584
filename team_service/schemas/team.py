# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from team_service.models.domain import Task, TeamMember


class TeamMemberRequest(BaseModel):
    """Body of POST / and PUT /{memberId}. Presence checks only."""
    id: str
    name: str
    email: str
    tasks: list[Task] = Field(default_factory=list)

    def to_domain(self) -> TeamMember:
        return TeamMember(**self.model_dump())


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
