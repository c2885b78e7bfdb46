"""
Prometheus metrics for the message board.

This module provides:
- HTTP request counter (method, path, status)
- Request latency histogram (method, path)
- Message operation counter (operation, result)
- Stored messages gauge

Metrics are stored in-memory using prometheus-client.
"""

from prometheus_client import Counter, Gauge, Histogram, generate_latest, CONTENT_TYPE_LATEST


# =============================================================================
# Metric Definitions
# =============================================================================

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=["method", "path", "status"]
)

# operation: messages, addMessage
# result: listed, created, validation_error
message_operations_total = Counter(
    "message_operations_total",
    "Total message store operations by outcome",
    labelnames=["operation", "result"]
)

# Default buckets: .005 ... 10.0
request_latency_seconds = Histogram(
    "request_latency_seconds",
    "Request latency in seconds",
    labelnames=["method", "path"]
)

messages_stored = Gauge(
    "messages_stored",
    "Number of messages held by the store"
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_http_request(method: str, path: str, status: int, latency_seconds: float) -> None:
    """
    Record an HTTP request in metrics.

    Args:
        method: HTTP method (GET, POST, etc.)
        path: Request path
        status: HTTP status code
        latency_seconds: Request processing time in seconds
    """
    normalized_path = path.split("?")[0]

    http_requests_total.labels(
        method=method,
        path=normalized_path,
        status=str(status)
    ).inc()

    request_latency_seconds.labels(
        method=method,
        path=normalized_path
    ).observe(latency_seconds)


def record_message_operation(operation: str, result: str, stored: int | None = None) -> None:
    """
    Record a message store operation outcome.

    Args:
        operation: "messages" or "addMessage"
        result: "listed", "created" or "validation_error"
        stored: Current store size, updates the gauge when given
    """
    message_operations_total.labels(operation=operation, result=result).inc()
    if stored is not None:
        record_store_size(stored)


def record_store_size(stored: int) -> None:
    """Set the gauge to the current size of the live store."""
    messages_stored.set(stored)


def get_metrics() -> bytes:
    """Generate Prometheus exposition format metrics."""
    return generate_latest()


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
