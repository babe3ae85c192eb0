"""Observability module for structured logging, tracing, and metrics."""

from search_server.observability.context import bind_span, get_trace_context, trace_context
from search_server.observability.logging import JsonFormatter, configure_logging
from search_server.observability.metrics import (
    DOCUMENTS_ADDED,
    ERROR_COUNT,
    INDEX_DOC_COUNT,
    SEARCH_LATENCY,
    MetricBridge,
    track_latency,
)
from search_server.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DOCUMENTS_ADDED",
    "ERROR_COUNT",
    "INDEX_DOC_COUNT",
    "SEARCH_LATENCY",
    "JsonFormatter",
    "MetricBridge",
    "bind_span",
    "configure_logging",
    "create_span",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "trace_context",
    "track_latency",
]
