from __future__ import annotations

import asyncio

import structlog
from prometheus_client import (
    CollectorRegistry,
    Counter,
    GCCollector,
    Gauge,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)


HTTP_DURATION_BUCKETS = (0.01, 0.05, 0.1, 0.3, 1, 3, 10)
HTTP_LABELS = ("method", "route", "code")


class HttpMetrics:
    """Prometheus metrics owned by one application instance (resets on restart).

    Each instance has its own registry, so several apps (e.g. one per test)
    never collide on metric names.
    """

    def __init__(self, registry: CollectorRegistry | None = None, *, default_collectors: bool = True) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        if default_collectors:
            # CPU, memory, open fds, GC and interpreter info.
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

        self.event_loop_lag = Gauge(
            "api_event_loop_lag_seconds",
            "Lag of the asyncio event loop in seconds",
            registry=self.registry,
        )
        self.http_requests_total = Counter(
            "api_http_requests_total",
            "Total number of HTTP requests",
            HTTP_LABELS,
            registry=self.registry,
        )
        self.http_request_duration = Histogram(
            "api_http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            HTTP_LABELS,
            buckets=HTTP_DURATION_BUCKETS,
            registry=self.registry,
        )

    def observe_http_request(self, method: str, route: str, code: int, elapsed_seconds: float) -> None:
        labels = {"method": method, "route": route, "code": str(code)}
        self.http_requests_total.labels(**labels).inc()
        self.http_request_duration.labels(**labels).observe(elapsed_seconds)

    def render(self) -> bytes:
        return generate_latest(self.registry)


async def monitor_event_loop_lag(metrics: HttpMetrics, interval: float = 0.5) -> None:
    """Sample how late the loop wakes up from a timed sleep, forever."""

    loop = asyncio.get_running_loop()
    while True:
        started = loop.time()
        await asyncio.sleep(interval)
        lag = loop.time() - started - interval
        metrics.event_loop_lag.set(max(lag, 0.0))
        if lag > 1.0:
            structlog.get_logger("metrics").warning("event_loop.lagging", lag_seconds=round(lag, 3))
