# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, g, request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "anonbox_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "anonbox_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
MESSAGES_POSTED = Counter(
    "anonbox_messages_posted_total",
    "Anonymous messages accepted",
)


class RequestMetrics:
    """Metrics sink handed to controllers; keeps prometheus out of use cases."""

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled

    def message_posted(self) -> None:
        if self.enabled:
            MESSAGES_POSTED.inc()

    def observe(self, endpoint: str, status: int, duration: float) -> None:
        if not self.enabled:
            return
        REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
        REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()

    def bind(self, app: Flask) -> None:
        @app.before_request
        def _start_metrics_timer() -> None:
            g.metrics_t0 = time.perf_counter()

        @app.after_request
        def _record_metrics(response):
            started = getattr(g, "metrics_t0", None)
            if started is not None:
                self.observe(
                    request.endpoint or "unknown",
                    response.status_code,
                    time.perf_counter() - started,
                )
            return response


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "MESSAGES_POSTED",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "RequestMetrics",
    "render_metrics",
]
