"""Unit tests for kernel messaging primitives."""

from __future__ import annotations

import pytest

from pick_request_service.kernel.messaging import (
    DeadLetterEntry,
    Delivery,
    InboundMessage,
    RoutingMessage,
)


class TestMessagePrimitives:
    def test_inbound_message_defaults(self) -> None:
        msg = InboundMessage()
        assert msg.data is None
        assert msg.attributes is None

    def test_delivery_is_frozen(self) -> None:
        delivery = Delivery(event_id="evt-1")
        with pytest.raises((AttributeError, TypeError)):
            delivery.event_id = "evt-2"  # type: ignore[misc]

    def test_routing_message_default_attributes(self) -> None:
        assert RoutingMessage(topic="t", payload={}).attributes == {}


class TestDeadLetterEntry:
    def test_ids_are_unique(self) -> None:
        assert DeadLetterEntry().id != DeadLetterEntry().id

    def test_failed_at_is_aware(self) -> None:
        assert DeadLetterEntry().failed_at.tzinfo is not None
