"""Observability – Tracer, Span, SpanKind ports."""
from __future__ import annotations

import abc
import contextlib
from enum import Enum
from typing import Any, AsyncIterator


class SpanKind(str, Enum):
    INTERNAL = "INTERNAL"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"


class Span(abc.ABC):
    """Represents an active trace span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def record_exception(self, exc: BaseException) -> None: ...


class Tracer(abc.ABC):
    """Port: create spans around message processing."""

    @abc.abstractmethod
    @contextlib.asynccontextmanager
    async def start_async_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> AsyncIterator[Span]: ...


__all__ = ["Span", "SpanKind", "Tracer"]
