"""Prometheus metrics for monitoring approval rates and error responses"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan eligibility decisions made",
    ["outcome"],  # approved | declined
)

error_response_counter = Counter(
    "loan_error_response_total",
    "Error responses by published error code",
    ["code"],
)

# Market API metrics
price_lookup_failures_counter = Counter(
    "loan_price_lookup_failures_total",
    "Failed market price lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(approved: bool) -> None:
    """Record decision outcome for monitoring approval rates"""
    outcome = "approved" if approved else "declined"
    decision_counter.labels(outcome=outcome).inc()


def record_error(code: str) -> None:
    error_response_counter.labels(code=code).inc()
