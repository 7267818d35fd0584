# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Team Service
============
In-memory CRUD for team members and the tasks they own.

    GET    /members/{member_id}/tasks/{task_id}
    GET    /{member_id}/tasks
    GET    /{member_id}
    POST   /
    PUT    /{member_id}
    DELETE /{member_id}

State lives in a single process-wide MemberRepository and is lost on restart.

Port: 8080
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from team_service.controllers import system_controller, team_controller
from team_service.core.config import settings
from team_service.core.dependencies import get_member_repo, get_team_service
from team_service.core.logging import get_logger
from team_service.middleware import MetricsMiddleware, RequestIDMiddleware, error_response
from team_service.schemas.team import ErrorResponse
from team_service.services.seed import seed_demo_members

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    if settings.SEED_DEMO_MEMBERS:
        seed_demo_members(get_team_service())
    logger.info(
        "Team service starting — version=%s, members=%d",
        settings.SERVICE_VERSION, get_member_repo().count(),
    )
    yield
    logger.info("Team service shutting down — %d members in memory", get_member_repo().count())


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Team Service",
    description="Team members and their tasks, held in memory.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

# RequestIDMiddleware wraps MetricsMiddleware: metrics see a failing handler first.
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return error_response(req_id, exc)


# System routes first: /health and /metrics must not be read as member ids.
app.include_router(system_controller.router)
app.include_router(team_controller.router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.SERVICE_PORT, log_level=settings.LOG_LEVEL.lower())
