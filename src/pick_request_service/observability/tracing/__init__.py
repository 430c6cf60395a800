"""Observability – tracing ports and the no-op tracer."""
from pick_request_service.observability.tracing.noop import NoopTracer
from pick_request_service.observability.tracing.ports import Span, SpanKind, Tracer

__all__ = ["NoopTracer", "Span", "SpanKind", "Tracer"]
