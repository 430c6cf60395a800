"""Unit tests for MongoDB adapters – no running MongoDB required."""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pick_request_service.adapters.mongodb import MongoDeadLetterStore, MongoPickRequestRepository
from pick_request_service.kernel.messaging import DeadLetterEntry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _AsyncCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs
        self.sort = MagicMock(return_value=self)
        self.limit = MagicMock(return_value=self)

    def __aiter__(self) -> "_AsyncCursor":
        self._iter = iter(self._docs)
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


def _collection() -> MagicMock:
    col = MagicMock()
    col.find_one = AsyncMock(return_value=None)
    col.update_one = AsyncMock()
    col.insert_one = AsyncMock()
    col.create_index = AsyncMock()
    return col


# ---------------------------------------------------------------------------
# MongoPickRequestRepository
# ---------------------------------------------------------------------------


class TestMongoPickRequestRepository:
    def test_get_missing_returns_none(self) -> None:
        col = _collection()
        repo = MongoPickRequestRepository(col)
        assert asyncio.run(repo.get("1", "W")) is None
        col.find_one.assert_awaited_once_with({"wmsPickRequestIdentifier": "1", "wmsIdentifier": "W"})

    def test_get_maps_document(self) -> None:
        col = _collection()
        col.find_one = AsyncMock(
            return_value={
                "_id": "W-1",
                "wmsIdentifier": "W",
                "wmsPickRequestIdentifier": "1",
                "automationSystemIdentifier": "IWS-1",
                "status": "allocated",
                "cutOffTime": datetime(2021, 10, 8, 22, tzinfo=UTC),
            }
        )
        pr = asyncio.run(MongoPickRequestRepository(col).get("1", "W"))
        assert pr is not None
        assert pr.status == "allocated"
        assert pr.cut_off_time == datetime(2021, 10, 8, 22, tzinfo=UTC)
        assert "_id" not in pr.extra

    def test_upsert_merges(self) -> None:
        col = _collection()
        key = asyncio.run(MongoPickRequestRepository(col).upsert("W-1", {"status": "manually-picked"}))
        assert key == "W-1"
        col.update_one.assert_awaited_once_with(
            {"_id": "W-1"}, {"$set": {"status": "manually-picked"}}, upsert=True
        )

    def test_create_indexes(self) -> None:
        col = _collection()
        asyncio.run(MongoPickRequestRepository.create_indexes(col))
        col.create_index.assert_awaited_once()

    def test_from_url_uses_motor(self) -> None:
        import pick_request_service.adapters.mongodb.repository as repo_mod

        motor = MagicMock()
        with patch.object(repo_mod, "_require_motor", return_value=motor):
            MongoPickRequestRepository.from_url("mongodb://db", "pick_requests", "pick-request")
        motor.AsyncIOMotorClient.assert_called_once_with("mongodb://db", tz_aware=True)

    def test_require_motor_raises_when_missing(self) -> None:
        import pick_request_service.adapters.mongodb.repository as repo_mod

        with patch.dict("sys.modules", {"motor": None, "motor.motor_asyncio": None}):
            with pytest.raises(ImportError, match="pick-request-service\\[mongodb\\]"):
                repo_mod._require_motor()


# ---------------------------------------------------------------------------
# MongoDeadLetterStore
# ---------------------------------------------------------------------------


class TestMongoDeadLetterStore:
    def test_push_inserts_document(self) -> None:
        col = _collection()
        entry = DeadLetterEntry(event_id="evt-1", topic="t", reason="non-retryable error", error={"code": "x"})
        asyncio.run(MongoDeadLetterStore(col).push(entry))
        doc = col.insert_one.await_args.args[0]
        assert doc["_id"] == entry.id
        assert doc["event_id"] == "evt-1"
        assert doc["reason"] == "non-retryable error"

    def test_list_maps_documents(self) -> None:
        failed_at = datetime(2021, 10, 8, tzinfo=UTC)
        cursor = _AsyncCursor([{"_id": "dl-1", "event_id": "evt-1", "failed_at": failed_at}])
        col = _collection()
        col.find = MagicMock(return_value=cursor)
        entries = asyncio.run(MongoDeadLetterStore(col).list(limit=5))
        assert [e.id for e in entries] == ["dl-1"]
        assert entries[0].failed_at == failed_at
        cursor.sort.assert_called_once_with("failed_at", 1)
        cursor.limit.assert_called_once_with(5)

    def test_create_indexes_ttl(self) -> None:
        col = _collection()
        asyncio.run(MongoDeadLetterStore.create_indexes(col, retention_days=1))
        col.create_index.assert_awaited_once_with("failed_at", expireAfterSeconds=86400, name="idx_dead_letter_ttl")
