"""Prometheus metrics for indexing and query activity."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import REGISTRY, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


DOCUMENTS_INDEXED = Counter(
    "lse_documents_indexed_total",
    "Documents scanned and merged into the keyword index",
)

INDEX_KEYWORDS = Gauge(
    "lse_index_keywords",
    "Distinct keywords currently held by the index",
)

INDEX_BUILD_LATENCY = Histogram(
    "lse_index_build_seconds",
    "Time spent building the index from a document list",
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0),
)

QUERY_COUNT = Counter(
    "lse_queries_total",
    "Two-keyword queries answered",
    ["outcome"],
)

QUERY_LATENCY = Histogram(
    "lse_query_latency_seconds",
    "Two-keyword query latency",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Observe the wall time of the enclosed block on ``histogram``."""
    start = time.perf_counter()
    try:
        yield
    finally:
        target = histogram.labels(**labels) if labels else histogram
        target.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Render every registered metric in the Prometheus text format."""
    return generate_latest(REGISTRY)
