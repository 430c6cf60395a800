"""Flawed-message handling – decides between redelivery and drop.

The processor logs every failure and then hands it to a
:class:`FlawedMessageHandler`.  Returning from :meth:`handle` acknowledges
the message (no redelivery); raising hands the error back to the bus so it
redelivers.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol

from pick_request_service.kernel.errors import ReconciliationError
from pick_request_service.kernel.messaging import (
    DeadLetterEntry,
    DeadLetterStore,
    Delivery,
    InboundMessage,
)
from pick_request_service.kernel.time import Clock, SystemClock, event_age
from pick_request_service.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_EVENT_AGE = timedelta(hours=1)


class FlawedMessageHandler(Protocol):
    async def handle(self, error: Exception, message: InboundMessage, delivery: Delivery) -> None: ...


def is_retryable(error: BaseException) -> bool:
    """Classified errors carry their own flag; anything unclassified may be transient."""
    if isinstance(error, ReconciliationError):
        return error.retryable
    return True


def _describe(error: BaseException) -> dict[str, Any]:
    if isinstance(error, ReconciliationError):
        return error.to_dict()
    return {"type": type(error).__name__, "message": str(error)}


class RetryWindowFlawedMessageHandler:
    """Redeliver retryable failures while the event is young; dead-letter the rest.

    Deliveries without a timestamp are treated as outside the window.
    """

    def __init__(
        self,
        dead_letters: DeadLetterStore,
        *,
        max_event_age: timedelta = DEFAULT_MAX_EVENT_AGE,
        clock: Clock | None = None,
        source_topic: str = "",
    ) -> None:
        self._dead_letters = dead_letters
        self._max_event_age = max_event_age
        self._clock = clock or SystemClock()
        self._source_topic = source_topic

    def within_retry_window(self, delivery: Delivery) -> bool:
        if delivery.timestamp is None:
            return False
        return event_age(self._clock, delivery.timestamp) <= self._max_event_age

    async def handle(self, error: Exception, message: InboundMessage, delivery: Delivery) -> None:
        retryable = is_retryable(error)
        if retryable and self.within_retry_window(delivery):
            logger.info("pick_request.redelivery_requested", event_id=delivery.event_id)
            raise error

        entry = DeadLetterEntry(
            event_id=delivery.event_id,
            topic=self._source_topic,
            attributes={k: v for k, v in (message.attributes or {}).items() if v is not None},
            reason="retry window expired" if retryable else "non-retryable error",
            error=_describe(error),
        )
        await self._dead_letters.push(entry)
        logger.warning(
            "pick_request.retry_stopped",
            event_id=delivery.event_id,
            reason=entry.reason,
            dead_letter_id=entry.id,
        )


__all__ = [
    "DEFAULT_MAX_EVENT_AGE",
    "FlawedMessageHandler",
    "RetryWindowFlawedMessageHandler",
    "is_retryable",
]
