"""Monitoring utilities leveraging Prometheus client."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

http_requests_total = Counter(
    "campaign_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

http_request_latency_seconds = Histogram(
    "campaign_http_request_latency_seconds",
    "HTTP request latency",
    ["method", "path"],
)

assignments_total = Counter(
    "campaign_assignments_total",
    "Assignment notifications by terminal outcome",
    ["outcome"],
)

delivery_failures_total = Counter(
    "campaign_delivery_failures_total",
    "Primary delivery channel failures",
    ["channel"],
)


def observe_request(method: str, path: str, status: int, duration_seconds: float) -> None:
    http_requests_total.labels(method=method, path=path, status=str(status)).inc()
    http_request_latency_seconds.labels(method=method, path=path).observe(duration_seconds)


def observe_assignment(outcome: str) -> None:
    assignments_total.labels(outcome=outcome).inc()


def observe_delivery_failure(channel: str) -> None:
    delivery_failures_total.labels(channel=channel).inc()
