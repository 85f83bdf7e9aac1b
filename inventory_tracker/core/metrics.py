from __future__ import annotations

from typing import Any, Callable

from prometheus_client import Counter, Histogram, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from inventory_tracker.core.config import settings

_HTTP_LABELS = ("method", "route", "status_code")


class _NoOpMetric:
    def labels(self, *args: Any, **kwargs: Any) -> "_NoOpMetric":
        return self

    def observe(self, *_: Any) -> None:
        return None

    def inc(self, *_: Any) -> None:
        return None


def _metric(factory: Callable[[str], Any], name: str) -> Any:
    if not settings.METRICS_ENABLED:
        return _NoOpMetric()
    return factory(f"{settings.METRICS_NAMESPACE}_{name}")


REQUEST_LATENCY = _metric(
    lambda name: Histogram(
        name, "HTTP request latency in seconds.", _HTTP_LABELS, buckets=settings.METRICS_LATENCY_BUCKETS
    ),
    "http_request_duration_seconds",
)
REQUEST_COUNT = _metric(lambda name: Counter(name, "HTTP requests processed.", _HTTP_LABELS), "http_requests_total")
REQUEST_ERRORS = _metric(
    lambda name: Counter(name, "HTTP requests answered with 4xx/5xx.", _HTTP_LABELS), "http_errors_total"
)

# outcome is "committed" or the error code of the aborting exception.
MOVEMENTS = _metric(
    lambda name: Counter(name, "Movement transactions by outcome.", ["movement_type", "outcome"]),
    "movements_total",
)
ITEMS_MOVED = _metric(
    lambda name: Counter(name, "Products created or retired by committed movements.", ["movement_type"]),
    "items_moved_total",
)


def normalize_path(request) -> str:
    """Route template (``/api/outbound/{category}``) rather than the raw path, to bound label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def record_request_metrics(request, status_code: int, elapsed: float) -> None:
    labels = (request.method, normalize_path(request), str(status_code))
    REQUEST_COUNT.labels(*labels).inc()
    REQUEST_LATENCY.labels(*labels).observe(elapsed)
    if status_code >= 400:
        REQUEST_ERRORS.labels(*labels).inc()


def record_movement_outcome(movement_type: str, outcome: str, items: int = 0) -> None:
    MOVEMENTS.labels(movement_type=movement_type, outcome=outcome).inc()
    if items:
        ITEMS_MOVED.labels(movement_type=movement_type).inc(items)


def export_metrics() -> tuple[bytes, str]:
    if not settings.METRICS_ENABLED:
        return b"", "text/plain; charset=utf-8"
    return generate_latest(), CONTENT_TYPE_LATEST
