"""Observability – MessageContext, the ambient context of the message in flight."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from contextvars import ContextVar

TRACE_CONTEXT_HEADER = "X-Cloud-Trace-Context"


@dataclasses.dataclass(frozen=True)
class MessageContext:
    """Identifiers of the inbound message currently being processed."""

    event_id: str
    operation: str | None = None
    wms_identifier: str | None = None
    trace_context: str | None = None


_CTX_VAR: ContextVar[MessageContext | None] = ContextVar("_pick_request_message_ctx", default=None)


def normalize_trace_attributes(attributes: Mapping[str, str]) -> dict[str, str]:
    """Mirror ``X-Cloud-Trace-Context`` to its lowercase spelling when only the
    capitalised header is present."""
    normalized = dict(attributes)
    lower = TRACE_CONTEXT_HEADER.lower()
    if not normalized.get(lower) and normalized.get(TRACE_CONTEXT_HEADER):
        normalized[lower] = normalized[TRACE_CONTEXT_HEADER]
    return normalized


class MessageContextVar:
    """Ambient message context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: MessageContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> MessageContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def set_from_attributes(event_id: str, attributes: Mapping[str, str]) -> MessageContext:
        """Build the context from bus attributes and store it.

        Header names are matched case-insensitively.
        """
        norm = {k.lower(): v for k, v in attributes.items()}
        ctx = MessageContext(
            event_id=event_id,
            operation=norm.get("operation") or None,
            wms_identifier=norm.get("wmsidentifier") or None,
            trace_context=norm.get(TRACE_CONTEXT_HEADER.lower()) or None,
        )
        _CTX_VAR.set(ctx)
        return ctx


__all__ = [
    "MessageContext",
    "MessageContextVar",
    "TRACE_CONTEXT_HEADER",
    "normalize_trace_attributes",
]
