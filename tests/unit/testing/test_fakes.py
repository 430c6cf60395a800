"""Unit tests for the in-memory test fakes."""

from __future__ import annotations

import asyncio

import pytest

from pick_request_service.kernel.messaging import DeadLetterEntry, Delivery, InboundMessage, RoutingMessage
from pick_request_service.testing.fakes import (
    InMemoryDeadLetterStore,
    InMemoryInboxStore,
    InMemoryPickRequestRepository,
    InMemoryRoutingPublisher,
    RecordingFlawedMessageHandler,
)


class TestInMemoryPickRequestRepository:
    def test_upsert_merges(self) -> None:
        repo = InMemoryPickRequestRepository({"W-1": {"wmsIdentifier": "W", "wmsPickRequestIdentifier": "1", "status": "allocated"}})
        asyncio.run(repo.upsert("W-1", {"wmsPickRequestIdentifier": "1", "status": "picked"}))
        assert repo.document("W-1") == {"wmsIdentifier": "W", "wmsPickRequestIdentifier": "1", "status": "picked"}

    def test_get_by_identity(self) -> None:
        repo = InMemoryPickRequestRepository({"W-1": {"wmsIdentifier": "W", "wmsPickRequestIdentifier": "1"}})
        assert asyncio.run(repo.get("1", "W")) is not None
        assert asyncio.run(repo.get("1", "OTHER")) is None

    def test_failures(self) -> None:
        repo = InMemoryPickRequestRepository(fail_upsert_with=RuntimeError("down"))
        with pytest.raises(RuntimeError):
            asyncio.run(repo.upsert("k", {}))


class TestInMemoryInboxStore:
    def test_record_then_seen(self) -> None:
        inbox = InMemoryInboxStore()
        assert asyncio.run(inbox.has_been_processed("evt")) is False
        asyncio.run(inbox.record("evt"))
        assert asyncio.run(inbox.has_been_processed("evt")) is True


class TestInMemoryRoutingPublisher:
    def test_records_and_filters(self) -> None:
        pub = InMemoryRoutingPublisher()
        asyncio.run(pub.publish(RoutingMessage(topic="a", payload={})))
        asyncio.run(pub.publish(RoutingMessage(topic="b", payload={})))
        assert len(pub.of_topic("a")) == 1
        pub.clear()
        assert pub.published == []


class TestDeadLetterFakes:
    def test_store_push_and_list(self) -> None:
        store = InMemoryDeadLetterStore()
        asyncio.run(store.push(DeadLetterEntry(event_id="evt")))
        assert [e.event_id for e in asyncio.run(store.list())] == ["evt"]

    def test_recording_handler(self) -> None:
        handler = RecordingFlawedMessageHandler()
        error = RuntimeError("boom")
        asyncio.run(handler.handle(error, InboundMessage(), Delivery(event_id="evt")))
        assert handler.errors == [error]

    def test_recording_handler_reraise(self) -> None:
        handler = RecordingFlawedMessageHandler(reraise=True)
        with pytest.raises(RuntimeError):
            asyncio.run(handler.handle(RuntimeError("boom"), InboundMessage(), Delivery(event_id="evt")))
