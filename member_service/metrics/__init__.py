# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""
from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "member_requests_total",
    "Total HTTP requests to member service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "member_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "member_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBER_OPERATIONS = Counter(
    "member_operations_total",
    "Member operations by outcome",
    ["operation", "outcome"],
)
