"""Observability – message context."""
from pick_request_service.observability.correlation.context import (
    TRACE_CONTEXT_HEADER,
    MessageContext,
    MessageContextVar,
    normalize_trace_attributes,
)

__all__ = ["MessageContext", "MessageContextVar", "TRACE_CONTEXT_HEADER", "normalize_trace_attributes"]
