# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: ops endpoints for the team service.
Health reports how many members the in-memory store holds; readiness flips
once at least one member exists.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from team_service.core.config import settings
from team_service.core.dependencies import get_member_repo
from team_service.repositories.member_repository import MemberRepository

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(repo: MemberRepository = Depends(get_member_repo)):
    """Liveness plus the current member count."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "members_count": repo.count(),
    }


@router.get("/health/ready")
def readiness_check(repo: MemberRepository = Depends(get_member_repo)):
    """members_loaded is false until the first member is stored."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "members_loaded": repo.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """HTTP and team_member_* metrics in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
