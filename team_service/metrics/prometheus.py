# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "team_requests_total",
    "Total HTTP requests to the team service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "team_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "team_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_ACTIVE = Gauge(
    "team_members_active",
    "Number of team members currently stored",
)
MEMBER_OPERATIONS = Counter(
    "team_member_operations_total",
    "Team member operations by outcome",
    ["operation", "outcome"],
)
TASK_LOOKUPS = Counter(
    "team_task_lookups_total",
    "Single-task lookups by outcome",
    ["outcome"],
)
