"""Correlation ids shared between log records and tracing spans."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


_correlation: ContextVar[dict | None] = ContextVar("lse_trace_context", default=None)


def generate_trace_id() -> str:
    """Generate a 32-char hex trace ID."""
    return uuid4().hex


def generate_span_id() -> str:
    """Generate a 16-char hex span ID."""
    return uuid4().hex[:16]


def get_trace_context() -> dict:
    """Return the current ids, creating a fresh trace when none is active."""
    ctx = _correlation.get()
    if ctx is None or not ctx.get("trace_id"):
        ctx = {"trace_id": generate_trace_id(), "span_id": generate_span_id()}
        _correlation.set(ctx)
    return ctx


def set_trace_context(trace_id: str, span_id: str, **extra: object) -> None:
    _correlation.set({"trace_id": trace_id, "span_id": span_id, **extra})


def bind_span(trace_id: int, span_id: int, operation: str | None = None) -> None:
    """Record OpenTelemetry span ids (ints) so log lines can be correlated."""
    ctx = dict(_correlation.get() or {})
    ctx["trace_id"] = format(trace_id, "032x")
    ctx["span_id"] = format(span_id, "016x")
    if operation:
        ctx["operation"] = operation
    _correlation.set(ctx)


def clear_trace_context() -> None:
    _correlation.set(None)
