"""Prometheus metrics & middleware for the numstats service.

Collects per-endpoint request count and latency, counts statistic
computations by outcome, and exposes a /metrics endpoint for Prometheus.
"""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
import time

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "numstats_request_total"
REQUEST_LATENCY_NAME = "numstats_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "numstats_request_errors_total"
STATISTIC_COUNT_NAME = "numstats_statistic_total"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Global and thread-safe; registered on the default registry at import time.
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

# Exposed as _bucket/_count/_sum series, e.g.
# numstats_request_duration_seconds_bucket{le="0.5",...} 3.0
REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# outcome is one of: ok, empty, overflow, unavailable
STATISTIC_COUNT = Counter(
    name=STATISTIC_COUNT_NAME,
    documentation="Statistic computations by statistic and outcome",
    labelnames=["statistic", "outcome"],
)

# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Wraps every HTTP request: records the start time, then on response start
# increments the request counter and observes the latency. Labels come from the
# route path template when available, the HTTP method and the status code.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # Only instrument HTTP requests (not websockets, lifespan, etc.)
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                # Template ("/stats/mean") if routed, raw path otherwise
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)

# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    # Plaintext exposition format, scraped by Prometheus
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
