"""Prometheus metrics for the CreditAI Gateway service.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- creditai_scores_total: Questionnaires scored by risk band and recommendation
- creditai_credit_score: Distribution of computed credit scores
- creditai_reports_total: PDF reports rendered

Technical Metrics (for Engineering/SRE):
- creditai_scoring_latency_seconds: Scoring latency
- creditai_chat_requests_total: Chat completions by outcome
- creditai_chat_latency_seconds: Chat completion latency
- creditai_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Risk dashboards)
# =============================================================================

scores_total = Counter(
    "creditai_scores_total",
    "Total number of questionnaires scored",
    ["risk_band", "recommendation"],
)

credit_score_histogram = Histogram(
    "creditai_credit_score",
    "Distribution of computed credit scores",
    buckets=[350, 400, 450, 500, 550, 600, 650, 700, 750, 800, 850],
)

reports_total = Counter(
    "creditai_reports_total",
    "Total number of PDF score reports rendered",
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

scoring_latency = Histogram(
    "creditai_scoring_latency_seconds",
    "Scoring latency in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

chat_requests_total = Counter(
    "creditai_chat_requests_total",
    "Total chat completion requests by outcome",
    ["outcome"],  # success, rate_limited, quota_exceeded, error, connection_error
)

chat_latency = Histogram(
    "creditai_chat_latency_seconds",
    "Chat completion latency in seconds (full stream)",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

http_requests_total = Counter(
    "creditai_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "creditai_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_score(risk_band: str, recommendation: str, credit_score: int) -> None:
    """Record a scored questionnaire in metrics."""
    scores_total.labels(risk_band=risk_band, recommendation=recommendation).inc()
    credit_score_histogram.observe(credit_score)


def record_report() -> None:
    """Record a rendered report."""
    reports_total.inc()


def record_chat_outcome(outcome: str) -> None:
    """Record the outcome of a chat completion."""
    chat_requests_total.labels(outcome=outcome).inc()


@contextmanager
def track_scoring_latency() -> Generator[None, None, None]:
    """Context manager to track scoring latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        scoring_latency.observe(duration)


@contextmanager
def track_chat_latency() -> Generator[None, None, None]:
    """Context manager to track chat completion latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        chat_latency.observe(duration)


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
