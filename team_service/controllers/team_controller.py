# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Team member CRUD and task lookups.
Thin HTTP layer — delegates ALL logic to TeamService and only maps
absent results onto HTTP statuses.
"""

from fastapi import APIRouter, Depends, Response

from team_service.core.dependencies import get_team_service
from team_service.models.domain import Task, TeamMember
from team_service.schemas.team import TeamMemberRequest
from team_service.services.team_service import TeamService

router = APIRouter(tags=["Team"])


# ── Tasks ──

@router.get("/members/{member_id}/tasks/{task_id}", response_model=Task)
def get_task_details(
    member_id: str,
    task_id: str,
    service: TeamService = Depends(get_team_service),
):
    """Fetch one task of a member. An unknown task answers 200 with an empty body."""
    task = service.get_task(member_id, task_id)
    if task is None:
        return Response(status_code=200)
    return task


@router.get("/{member_id}/tasks", response_model=list[Task])
def get_tasks(
    member_id: str,
    service: TeamService = Depends(get_team_service),
):
    """List a member's tasks; an unknown member yields an empty list."""
    return service.get_tasks(member_id) or []


# ── Members ──

@router.get("/{member_id}", response_model=TeamMember)
def get_team_member(
    member_id: str,
    service: TeamService = Depends(get_team_service),
):
    member = service.get_team_member(member_id)
    if member is None:
        return Response(status_code=200)
    return member


@router.post("/", response_model=TeamMember)
def add_team_member(
    payload: TeamMemberRequest,
    service: TeamService = Depends(get_team_service),
):
    return service.add_team_member(payload.to_domain())


@router.put("/{member_id}", response_model=TeamMember)
def update_team_member(
    member_id: str,
    payload: TeamMemberRequest,
    service: TeamService = Depends(get_team_service),
):
    """Replace a member wholesale. 404 with no body if the id is unknown."""
    updated = service.update_team_member(member_id, payload.to_domain())
    if updated is None:
        return Response(status_code=404)
    return updated


@router.delete("/{member_id}", status_code=204)
def delete_team_member(
    member_id: str,
    service: TeamService = Depends(get_team_service),
):
    if service.delete_team_member(member_id):
        return Response(status_code=204)
    return Response(status_code=404)
