# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request ID propagation, access logging and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from team_service.core.logging import get_logger
from team_service.metrics.prometheus import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS
from team_service.schemas.team import ErrorResponse

logger = get_logger(__name__)

KNOWN_SEGMENTS: set[str] = {"members", "tasks"}

SKIP_PATHS: tuple[str, ...] = (
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
)


def normalize_path(path: str) -> str:
    """Collapse id segments so metrics keep a bounded label set."""
    parts = path.strip("/").split("/")
    if parts == [""]:
        return "/"
    return "/" + "/".join(p if p in KNOWN_SEGMENTS else "{param}" for p in parts)


def error_response(request_id: str | None, exc: Exception) -> JSONResponse:
    """500 body shared by the middleware and the app-level handler."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="internal_server_error", detail=str(exc), request_id=request_id,
        ).model_dump(),
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Propagate or generate X-Request-ID and write one access-log line per request.
    Unhandled handler errors are turned into a 500 here so the header is kept.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled exception on %s %s",
                request.method, request.url.path,
                extra={"request_id": request_id},
            )
            response = error_response(request_id, exc)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "%s %s -> %d",
            request.method, request.url.path, response.status_code,
            extra={"request_id": request_id},
        )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Track request count, latency, and error rate via Prometheus."""

    async def dispatch(self, request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            self._record(request, 500, time.time() - start)
            raise
        self._record(request, response.status_code, time.time() - start)
        return response

    @staticmethod
    def _record(request: Request, status_code: int, duration: float) -> None:
        path = request.url.path
        if path in SKIP_PATHS:
            return
        endpoint = normalize_path(path)
        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status=str(status_code),
        ).inc()
        REQUEST_LATENCY.labels(
            method=request.method,
            endpoint=endpoint,
        ).observe(duration)
        if status_code >= 400:
            HTTP_ERRORS.labels(
                method=request.method,
                endpoint=endpoint,
                status=str(status_code),
            ).inc()
