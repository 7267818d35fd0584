# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service package — re-exports TeamService."""
from team_service.services.team_service import TeamService

__all__ = ["TeamService"]
