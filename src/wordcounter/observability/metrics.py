"""
Defines Prometheus metrics for counting calls.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram
from prometheus_client import generate_latest

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (test reloads, multiple entry points) must reuse
# the collectors already registered instead of raising.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]

METRICS: Dict[str, Any] = {
    "extractions": Counter(
        "wordcounter_extractions_total",
        "Documents and selections counted, by extraction strategy",
        ["strategy"],
    ),
    "no_content": Counter(
        "wordcounter_no_content_total",
        "Counting calls that found no readable content",
    ),
    "analysis_failures": Counter(
        "wordcounter_analysis_failures_total",
        "Counting calls whose statistics degraded to the empty result",
    ),
    "extraction_duration_seconds": Histogram(
        "wordcounter_extraction_duration_seconds",
        "Time spent extracting and analyzing one document",
        buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
    ),
}


def increment(name: str, value: float = 1.0, **labels: Any) -> None:
    """Increment a counter metric, ignoring unknown names."""
    metric = METRICS.get(name)
    if metric is None:
        return
    if labels:
        metric.labels(**labels).inc(value)
    else:
        metric.inc(value)


@contextmanager
def timed(name: str) -> Iterator[None]:
    """Observe the duration of the wrapped block in a histogram metric."""
    start = time.perf_counter()
    try:
        yield
    finally:
        metric = METRICS.get(name)
        if metric is not None:
            metric.observe(time.perf_counter() - start)


def export_prometheus() -> str:
    """Export metrics in Prometheus text format."""
    return generate_latest(_PROM_REGISTRY).decode("utf-8")
