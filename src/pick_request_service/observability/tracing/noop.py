"""Observability – tracer used when the ``otel`` extra is not wired in.

Message processing always opens a CONSUMER span; without a tracing backend
that span discards everything written to it.
"""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from pick_request_service.observability.tracing.ports import Span, SpanKind, Tracer


class _DiscardingSpan(Span):
    __slots__ = ()

    def set_attribute(self, key: str, value: Any) -> None:
        return None

    def record_exception(self, exc: BaseException) -> None:
        return None


_SPAN = _DiscardingSpan()


class NoopTracer(Tracer):
    """Hands out one shared span that ignores attributes and exceptions."""

    @contextlib.asynccontextmanager
    async def start_async_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> AsyncIterator[Span]:
        del name, kind, attributes
        yield _SPAN


__all__ = ["NoopTracer"]
