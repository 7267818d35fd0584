# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports MemberRepository."""
from team_service.repositories.member_repository import MemberRepository

__all__ = ["MemberRepository"]
