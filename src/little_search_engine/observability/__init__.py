"""Observability module for tracing, metrics, and logging."""

from little_search_engine.observability.context import (
    bind_span,
    clear_trace_context,
    get_trace_context,
    set_trace_context,
)
from little_search_engine.observability.logging import JsonFormatter, configure_logging
from little_search_engine.observability.metrics import (
    DOCUMENTS_INDEXED,
    INDEX_BUILD_LATENCY,
    INDEX_KEYWORDS,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    track_latency,
)
from little_search_engine.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DOCUMENTS_INDEXED",
    "INDEX_BUILD_LATENCY",
    "INDEX_KEYWORDS",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "bind_span",
    "clear_trace_context",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "track_latency",
]
