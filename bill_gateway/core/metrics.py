"""Prometheus metrics for the Bill Gateway service.

Technical Metrics (for Engineering/SRE):
- bill_gateway_upstream_calls_total: Alipay OpenAPI calls by method and outcome
- bill_gateway_upstream_latency_seconds: Alipay OpenAPI call latency
- bill_gateway_signatures_total: HMAC signatures generated or rejected
- bill_gateway_http_requests_total: HTTP requests by endpoint/status
- bill_gateway_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


upstream_calls_total = Counter(
    "bill_gateway_upstream_calls_total",
    "Total number of Alipay OpenAPI calls",
    ["method", "outcome"],  # success, failure, exception
)

upstream_latency = Histogram(
    "bill_gateway_upstream_latency_seconds",
    "Alipay OpenAPI call latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 15.0],
)

signatures_total = Counter(
    "bill_gateway_signatures_total",
    "Total number of HMAC signature requests",
    ["outcome"],  # signed, rejected, error
)

http_requests_total = Counter(
    "bill_gateway_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "bill_gateway_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


@contextmanager
def track_upstream_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track Alipay OpenAPI latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        upstream_latency.labels(method=method).observe(duration)


def record_upstream_call(method: str, outcome: str) -> None:
    """Record the outcome of an Alipay OpenAPI call."""
    upstream_calls_total.labels(method=method, outcome=outcome).inc()


def record_signature(outcome: str) -> None:
    """Record a /sign request outcome."""
    signatures_total.labels(outcome=outcome).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
