"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from pick_request_service.observability.correlation import MessageContextVar


class MessageContextProcessor:
    """structlog processor that injects the active :class:`MessageContext`.

    Adds ``event_id`` always, and ``operation``, ``wms_identifier`` and
    ``trace_context`` when they are known.  Values already bound on the
    logger win.

    Usage::

        structlog.configure(processors=[MessageContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = MessageContextVar.get()
        if ctx is not None:
            event_dict.setdefault("event_id", ctx.event_id)
            if ctx.operation is not None:
                event_dict.setdefault("operation", ctx.operation)
            if ctx.wms_identifier is not None:
                event_dict.setdefault("wms_identifier", ctx.wms_identifier)
            if ctx.trace_context is not None:
                event_dict.setdefault("trace_context", ctx.trace_context)
        return event_dict


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger named *name* (typically ``__name__``)."""
    return structlog.get_logger(name)


__all__ = ["MessageContextProcessor", "get_logger"]
