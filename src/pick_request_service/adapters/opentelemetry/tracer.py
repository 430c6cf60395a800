"""OpenTelemetry adapter – OtelTracer."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from pick_request_service.observability.tracing import Span, SpanKind, Tracer


def _require_otel() -> Any:
    try:
        from opentelemetry import trace  # type: ignore[import-untyped]
        return trace
    except ImportError as exc:
        raise ImportError("Install 'pick-request-service[otel]' to use the OpenTelemetry adapter") from exc


class _OtelSpan(Span):
    def __init__(self, span: Any, trace: Any) -> None:
        self._span = span
        self._trace = trace

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def record_exception(self, exc: BaseException) -> None:
        self._span.record_exception(exc)
        self._span.set_status(self._trace.StatusCode.ERROR, str(exc))


class OtelTracer(Tracer):
    """OpenTelemetry tracer adapter."""

    def __init__(self, service_name: str = "pick-request-service") -> None:
        self._trace = _require_otel()
        self._tracer = self._trace.get_tracer(service_name)

    @contextlib.asynccontextmanager
    async def start_async_span(self, name: str, kind: SpanKind = SpanKind.INTERNAL, attributes: dict[str, Any] | None = None) -> AsyncIterator[Span]:
        otel_kind = getattr(self._trace.SpanKind, kind.value, self._trace.SpanKind.INTERNAL)
        with self._tracer.start_as_current_span(name, kind=otel_kind, attributes=attributes) as span:
            yield _OtelSpan(span, self._trace)


__all__ = ["OtelTracer"]
