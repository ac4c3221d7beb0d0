from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from contextvars import ContextVar
from dataclasses import asdict, dataclass
from typing import Protocol

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

# Routes served by the locator app. Anything else is reported as one label
# value so scanners hitting random paths cannot grow the label set.
LOCATOR_ROUTES = frozenset({"/", "/healthz", "/readyz", "/metrics"})
UNMATCHED_ROUTE = "unmatched"
DEFAULT_MAX_ENTRIES = 1000

_trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")


def set_trace_id(trace_id: str) -> None:
    _trace_id_ctx.set(trace_id)


def get_trace_id() -> str:
    return _trace_id_ctx.get()


@dataclass(frozen=True)
class ApiRequestMetric:
    method: str
    path: str
    status_code: int
    duration_ms: float
    trace_id: str

    @property
    def is_lookup(self) -> bool:
        return self.method == "POST" and self.path == "/"


class ApiMetricCollector(Protocol):
    def observe(self, metric: ApiRequestMetric) -> None: ...


class InMemoryApiMetricsCollector(ApiMetricCollector):
    """Keeps the most recent requests for inspection in tests and debugging.

    Older entries are dropped once ``max_entries`` is reached.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0")
        self._metrics: deque[ApiRequestMetric] = deque(maxlen=max_entries)

    def __len__(self) -> int:
        return len(self._metrics)

    @property
    def max_entries(self) -> int:
        return self._metrics.maxlen or 0

    def observe(self, metric: ApiRequestMetric) -> None:
        self._metrics.append(metric)

    def snapshot(self, lookups_only: bool = False) -> list[dict]:
        return [asdict(item) for item in self._metrics if item.is_lookup or not lookups_only]


class PrometheusApiMetricsCollector(ApiMetricCollector):
    def __init__(self, routes: Iterable[str] = LOCATOR_ROUTES) -> None:
        self._routes = frozenset(routes)
        self._registry = CollectorRegistry()
        self._request_counter = Counter(
            "locator_http_requests_total",
            "Nearest airport API HTTP requests",
            labelnames=("method", "route", "status_code"),
            registry=self._registry,
        )
        # the pipeline deadline is 4 s, so buckets stop just past it
        self._latency_histogram = Histogram(
            "locator_http_request_duration_ms",
            "Nearest airport API HTTP latency in milliseconds",
            labelnames=("method", "route"),
            buckets=(1, 5, 10, 25, 50, 100, 250, 1000, 2000, 4000, 5000),
            registry=self._registry,
        )
        self._lookup_failures = Counter(
            "locator_lookup_failures_total",
            "Nearest airport lookups answered with the failure envelope",
            registry=self._registry,
        )

    def route_label(self, path: str) -> str:
        return path if path in self._routes else UNMATCHED_ROUTE

    def observe(self, metric: ApiRequestMetric) -> None:
        route = self.route_label(metric.path)
        self._request_counter.labels(metric.method, route, str(metric.status_code)).inc()
        self._latency_histogram.labels(metric.method, route).observe(metric.duration_ms)
        if metric.is_lookup and metric.status_code >= 500:
            self._lookup_failures.inc()

    def render(self) -> str:
        return generate_latest(self._registry).decode("utf-8")


class CompositeApiMetricsCollector(ApiMetricCollector):
    def __init__(self, collectors: list[ApiMetricCollector]) -> None:
        self._collectors = collectors

    def observe(self, metric: ApiRequestMetric) -> None:
        for collector in self._collectors:
            collector.observe(metric)
