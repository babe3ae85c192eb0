"""Trace correlation ids stamped on log records.

``create_span`` binds the ids of the active OpenTelemetry span for the duration
of the span. Records logged outside any span share one random trace id per
execution context.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from uuid import uuid4


trace_context: ContextVar[dict[str, str] | None] = ContextVar("trace_context", default=None)


def get_trace_context() -> dict[str, str]:
    """Return the ``trace_id``/``span_id`` pair for the current context."""
    ctx = trace_context.get()
    if ctx is None:
        ctx = {"trace_id": uuid4().hex, "span_id": uuid4().hex[:16]}
        trace_context.set(ctx)
    return ctx


def bind_span(trace_id: int, span_id: int) -> Token:
    """Bind OpenTelemetry span ids as W3C hex strings; reset with the returned token."""
    return trace_context.set({"trace_id": format(trace_id, "032x"), "span_id": format(span_id, "016x")})
