"""Kernel messaging – inbound/outbound message primitives and the routing port."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeAlias

EventId: TypeAlias = str
MessageAttributes: TypeAlias = Mapping[str, str]


@dataclasses.dataclass(frozen=True)
class InboundMessage:
    """Message as delivered by the bus: opaque ``data`` plus string attributes."""

    data: bytes | str | dict[str, Any] | None = None
    attributes: MessageAttributes | None = None


@dataclasses.dataclass(frozen=True)
class Delivery:
    """Delivery metadata for one inbound message."""

    event_id: EventId
    timestamp: datetime | None = None


@dataclasses.dataclass(frozen=True)
class RoutingMessage:
    """Normalized pick-request message for the downstream routing consumer."""

    topic: str
    payload: dict[str, Any]
    attributes: dict[str, str] = dataclasses.field(default_factory=dict)


class RoutingPublisher(abc.ABC):
    """Port: deliver a message to the routing topic (Pub/Sub, Kafka, …)."""

    @abc.abstractmethod
    async def publish(self, message: RoutingMessage) -> None: ...


__all__ = [
    "Delivery",
    "EventId",
    "InboundMessage",
    "MessageAttributes",
    "RoutingMessage",
    "RoutingPublisher",
]
