# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Team member data access.
Encapsulates all read/write operations on the members in-memory store.
NO business rules here — pure CRUD.
"""

from typing import Optional

from team_service.models.domain import TeamMember


class MemberRepository:
    """In-memory member storage, keyed by member id."""

    def __init__(self) -> None:
        self._store: dict[str, TeamMember] = {}

    # ── Read ──

    def get_by_id(self, member_id: str) -> Optional[TeamMember]:
        return self._store.get(member_id)

    def exists(self, member_id: str) -> bool:
        return member_id in self._store

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, member_id: str, member: TeamMember) -> None:
        self._store[member_id] = member

    def delete(self, member_id: str) -> Optional[TeamMember]:
        return self._store.pop(member_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
