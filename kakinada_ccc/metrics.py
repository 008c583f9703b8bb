"""
Kakinada CCC — Prometheus Metrics

Exposes /metrics for observability.
Tracks requests, operator actions, simulation runs and page renders.
"""
import time
from prometheus_client import (
    Counter, Histogram, Info,
    generate_latest, CONTENT_TYPE_LATEST
)
from fastapi import APIRouter, Request, Response


router = APIRouter()

# ═══════════════════════════════════════════════════════════
# COUNTERS
# ═══════════════════════════════════════════════════════════

api_requests = Counter(
    "ccc_api_requests_total",
    "Total API requests",
    ["method", "path", "status"]
)

operator_actions = Counter(
    "ccc_actions_total",
    "Operator actions applied to the view state",
    ["action"]
)

simulations_run = Counter(
    "ccc_simulations_total",
    "Detection / dataset simulation runs",
    ["source", "backend"]
)

page_renders = Counter(
    "ccc_page_renders_total",
    "Pages rendered by the UI",
    ["page"]
)

# ═══════════════════════════════════════════════════════════
# HISTOGRAMS
# ═══════════════════════════════════════════════════════════

api_request_latency = Histogram(
    "ccc_api_request_latency_seconds",
    "API request latency",
    ["method", "path"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

# ═══════════════════════════════════════════════════════════
# INFO
# ═══════════════════════════════════════════════════════════

build_info = Info(
    "ccc_build",
    "Build information"
)


# ═══════════════════════════════════════════════════════════
# METRICS ENDPOINT
# ═══════════════════════════════════════════════════════════

@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


# ═══════════════════════════════════════════════════════════
# MIDDLEWARE
# ═══════════════════════════════════════════════════════════

def route_template(request: Request) -> str:
    """Route template the request matched, or "unmatched"."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


async def track_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    dur = time.perf_counter() - start
    if not request.url.path.startswith(("/docs", "/openapi", "/redoc", "/metrics")):
        path = route_template(request)
        api_requests.labels(method=request.method, path=path,
                            status=str(response.status_code)).inc()
        api_request_latency.labels(method=request.method, path=path).observe(dur)
    return response
