"""Observability – message context, logging, tracing."""

from pick_request_service.observability.correlation import MessageContext, MessageContextVar
from pick_request_service.observability.logging import configure_logging, get_logger
from pick_request_service.observability.tracing import NoopTracer, Span, SpanKind, Tracer

__all__ = [
    "MessageContext",
    "MessageContextVar",
    "NoopTracer",
    "Span",
    "SpanKind",
    "Tracer",
    "configure_logging",
    "get_logger",
]
