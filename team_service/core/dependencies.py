# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the repository and the service.
"""

from team_service.repositories.member_repository import MemberRepository
from team_service.services.team_service import TeamService

# ── Process-wide instances (in-memory store) ──
_member_repo = MemberRepository()
_team_service = TeamService(member_repo=_member_repo)


# ── FastAPI dependency functions ──
def get_team_service() -> TeamService:
    return _team_service


def get_member_repo() -> MemberRepository:
    return _member_repo
