# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Demo data — the Chase walkthrough member used for local runs.
Only loaded when SEED_DEMO_MEMBERS=true.
"""

from typing import Any

from team_service.core.logging import get_logger
from team_service.models.domain import TeamMember
from team_service.services.team_service import TeamService

logger = get_logger(__name__)

DEMO_MEMBERS: list[dict[str, Any]] = [
    {
        "id": "Member1",
        "name": "Chase",
        "email": "chase@pawpatrol.org",
        "tasks": [
            {"id": "Task1", "name": "IoT Pipeline", "description": "Create CD pipeline for the IoT service"},
        ],
    },
]


def seed_demo_members(service: TeamService) -> int:
    """Add the demo members through the service. Returns how many were seeded."""
    for raw in DEMO_MEMBERS:
        service.add_team_member(TeamMember.model_validate(raw))
    logger.info("Seeded %d demo members", len(DEMO_MEMBERS))
    return len(DEMO_MEMBERS)
