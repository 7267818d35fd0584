# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Team members and their tasks.
Every lookup and mutation of the member store passes through here.
Absence is reported as None (lookups) or False (delete), never raised.
"""

from typing import Optional

from team_service.core.logging import get_logger
from team_service.metrics.prometheus import MEMBERS_ACTIVE, MEMBER_OPERATIONS, TASK_LOOKUPS
from team_service.models.domain import Task, TeamMember
from team_service.repositories.member_repository import MemberRepository

logger = get_logger(__name__)


class TeamService:
    """Business logic for team member CRUD and task lookups."""

    def __init__(self, member_repo: MemberRepository) -> None:
        self._members = member_repo

    # ── Queries ──

    def get_team_member(self, member_id: str) -> Optional[TeamMember]:
        member = self._members.get_by_id(member_id)
        if member is None:
            logger.debug("Member not found: id=%s", member_id)
        return member

    def get_tasks(self, member_id: str) -> Optional[list[Task]]:
        """Tasks of a member in stored order, or None for an unknown member."""
        member = self._members.get_by_id(member_id)
        if member is None:
            logger.debug("Tasks requested for unknown member: id=%s", member_id)
            return None
        return list(member.tasks)

    def get_task(self, member_id: str, task_id: str) -> Optional[Task]:
        """
        First task of the member whose id matches.
        Returns None if the member is unknown or no task matches.
        """
        member = self._members.get_by_id(member_id)
        if member is None:
            TASK_LOOKUPS.labels(outcome="member_not_found").inc()
            return None
        for task in member.tasks:
            if task.id == task_id:
                TASK_LOOKUPS.labels(outcome="found").inc()
                return task
        TASK_LOOKUPS.labels(outcome="task_not_found").inc()
        logger.debug("Task not found: member=%s, task=%s", member_id, task_id)
        return None

    # ── Commands ──

    def add_team_member(self, member: TeamMember) -> TeamMember:
        """Store a member under its own id, replacing any existing entry."""
        replaced = self._members.exists(member.id)
        self._members.save(member.id, member)
        MEMBER_OPERATIONS.labels(
            operation="add", outcome="replaced" if replaced else "created"
        ).inc()
        MEMBERS_ACTIVE.set(self._members.count())
        logger.info(
            "Member added: id=%s, tasks=%d, replaced=%s",
            member.id, len(member.tasks), replaced,
        )
        return member

    def update_team_member(
        self, member_id: str, updated_member: TeamMember
    ) -> Optional[TeamMember]:
        """
        Replace a stored member wholesale (tasks included, no merge).
        Unknown ids are left alone and yield None.
        """
        if not self._members.exists(member_id):
            MEMBER_OPERATIONS.labels(operation="update", outcome="not_found").inc()
            logger.info("Update skipped, unknown member: id=%s", member_id)
            return None
        self._members.save(member_id, updated_member)
        MEMBER_OPERATIONS.labels(operation="update", outcome="updated").inc()
        logger.info(
            "Member updated: id=%s, tasks=%d", member_id, len(updated_member.tasks)
        )
        return updated_member

    def delete_team_member(self, member_id: str) -> bool:
        if self._members.delete(member_id) is None:
            MEMBER_OPERATIONS.labels(operation="delete", outcome="not_found").inc()
            logger.info("Delete skipped, unknown member: id=%s", member_id)
            return False
        MEMBER_OPERATIONS.labels(operation="delete", outcome="deleted").inc()
        MEMBERS_ACTIVE.set(self._members.count())
        logger.info("Member deleted: id=%s", member_id)
        return True
