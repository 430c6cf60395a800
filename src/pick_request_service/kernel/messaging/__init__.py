"""Kernel messaging – message primitives, routing, inbox and dead-letter ports."""
from pick_request_service.kernel.messaging.dead_letter import DeadLetterEntry, DeadLetterStore
from pick_request_service.kernel.messaging.inbox import InboxStore
from pick_request_service.kernel.messaging.message import (
    Delivery,
    EventId,
    InboundMessage,
    MessageAttributes,
    RoutingMessage,
    RoutingPublisher,
)

__all__ = [
    "DeadLetterEntry",
    "DeadLetterStore",
    "Delivery",
    "EventId",
    "InboundMessage",
    "InboxStore",
    "MessageAttributes",
    "RoutingMessage",
    "RoutingPublisher",
]
