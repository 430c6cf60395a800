"""Ingest – per-delivery orchestration around the operation reconciler.

One call to :meth:`PickRequestMessageProcessor.process` handles exactly one
delivery:

1. validate the envelope attributes,
2. skip deliveries whose ``event_id`` was already processed,
3. decode the payload and reconcile it,
4. record the ``event_id`` as processed.

Any exception is logged and then delegated to the flawed-message handler,
which alone decides between redelivery (raise) and drop (return).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pick_request_service.application.flawed import FlawedMessageHandler, is_retryable
from pick_request_service.application.ingest.decoder import PayloadDecoder
from pick_request_service.application.reconciler import InboundEvent, OperationReconciler, Outcome
from pick_request_service.kernel.errors import (
    MalformedMessageError,
    PersistenceError,
    ReconciliationError,
)
from pick_request_service.kernel.messaging import Delivery, InboundMessage, InboxStore
from pick_request_service.observability.correlation import MessageContextVar, normalize_trace_attributes
from pick_request_service.observability.logging import get_logger
from pick_request_service.observability.tracing import NoopTracer, SpanKind, Tracer

logger = get_logger(__name__)

DEFAULT_SUBSCRIPTION = "pick-request-topic-subscription"


def _require_attribute(attributes: Mapping[str, Any], name: str) -> str:
    value = attributes.get(name)
    if not value:
        raise MalformedMessageError(
            f"{name} is missing in the attributes of the message",
            detail={"attribute": name},
        )
    return str(value)


class PickRequestMessageProcessor:
    """Entry point for one inbound pick-request delivery."""

    def __init__(
        self,
        reconciler: OperationReconciler,
        inbox: InboxStore,
        flawed_message_handler: FlawedMessageHandler,
        *,
        decoder: PayloadDecoder | None = None,
        tracer: Tracer | None = None,
        subscription: str = DEFAULT_SUBSCRIPTION,
    ) -> None:
        self._reconciler = reconciler
        self._inbox = inbox
        self._flawed = flawed_message_handler
        self._decoder = decoder or PayloadDecoder()
        self._tracer = tracer or NoopTracer()
        self._subscription = subscription

    async def process(self, message: InboundMessage, delivery: Delivery) -> Outcome:
        span_name = f"Message received from subscription[{self._subscription}]"
        attributes = {
            "messaging.message.id": delivery.event_id,
            "messaging.source.name": self._subscription,
        }
        async with self._tracer.start_async_span(span_name, SpanKind.CONSUMER, attributes) as span:
            try:
                outcome = await self._process(message, delivery)
                span.set_attribute("pick_request.outcome", outcome.value)
                return outcome
            except Exception as exc:
                span.record_exception(exc)
                self._log_failure(exc)
                await self._flawed.handle(exc, message, delivery)
                return Outcome.DROPPED
            finally:
                MessageContextVar.clear()

    async def _process(self, message: InboundMessage, delivery: Delivery) -> Outcome:
        if message.attributes is None:
            raise MalformedMessageError(
                f"Invalid message received from the push-subscription[{self._subscription}]"
            )
        attributes = normalize_trace_attributes(message.attributes)
        MessageContextVar.set_from_attributes(delivery.event_id, attributes)

        if await self._has_been_processed(delivery.event_id):
            logger.info("pick_request.duplicate_delivery")
            return Outcome.DUPLICATE_DELIVERY

        event = InboundEvent(
            operation=attributes.get("operation"),
            wms_identifier=_require_attribute(attributes, "wmsIdentifier"),
            automation_system_identifier=_require_attribute(attributes, "automationSystemIdentifier"),
            payload=self._decoder.decode(message.data),
            attributes=attributes,
            event_id=delivery.event_id,
        )
        outcome = await self._reconciler.reconcile(event)
        await self._record(delivery.event_id)
        return outcome

    async def _has_been_processed(self, event_id: str) -> bool:
        try:
            return await self._inbox.has_been_processed(event_id)
        except Exception as exc:
            raise PersistenceError("Could not read from inbox store.", key=event_id, cause=exc) from exc

    async def _record(self, event_id: str) -> None:
        try:
            await self._inbox.record(event_id)
        except Exception as exc:
            raise PersistenceError("Could not save to inbox store.", key=event_id, cause=exc) from exc

    def _log_failure(self, exc: Exception) -> None:
        if isinstance(exc, ReconciliationError):
            logger.error(
                "pick_request.processing_failed",
                error=exc.to_dict(),
                error_code=exc.code,
                error_kind=exc.to_dict()["kind"],
                retryable=exc.retryable,
            )
        else:
            logger.error(
                "pick_request.processing_failed",
                error={"type": type(exc).__name__, "message": str(exc)},
                retryable=is_retryable(exc),
                exc_info=exc,
            )


__all__ = ["DEFAULT_SUBSCRIPTION", "PickRequestMessageProcessor"]
