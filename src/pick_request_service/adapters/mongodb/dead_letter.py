"""MongoDB adapter – MongoDeadLetterStore."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pick_request_service.adapters.mongodb.repository import _require_motor
from pick_request_service.kernel.messaging import DeadLetterEntry, DeadLetterStore


class MongoDeadLetterStore(DeadLetterStore):
    """Dead-letter entries kept in their own collection.

    :meth:`create_indexes` adds a TTL index on ``failed_at`` so entries
    expire after *retention_days*.
    """

    COLLECTION_NAME = "pick-request-dead-letter"

    def __init__(self, collection: Any) -> None:
        self._col = collection

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str,
        collection: str = COLLECTION_NAME,
        **client_kwargs: Any,
    ) -> MongoDeadLetterStore:
        motor_asyncio = _require_motor()
        client = motor_asyncio.AsyncIOMotorClient(url, tz_aware=True, **client_kwargs)
        return cls(client[database][collection])

    @classmethod
    async def create_indexes(cls, collection: Any, retention_days: int = 14) -> None:
        await collection.create_index(
            "failed_at",
            expireAfterSeconds=retention_days * 24 * 3600,
            name="idx_dead_letter_ttl",
        )

    async def push(self, entry: DeadLetterEntry) -> None:
        await self._col.insert_one(self._to_doc(entry))

    async def list(self, limit: int = 100) -> list[DeadLetterEntry]:
        cursor = self._col.find({}).sort("failed_at", 1).limit(limit)
        return [self._from_doc(doc) async for doc in cursor]

    def _to_doc(self, entry: DeadLetterEntry) -> dict[str, Any]:
        return {
            "_id": entry.id,
            "event_id": entry.event_id,
            "topic": entry.topic,
            "attributes": entry.attributes,
            "reason": entry.reason,
            "error": entry.error,
            "failed_at": entry.failed_at,
        }

    def _from_doc(self, doc: dict[str, Any]) -> DeadLetterEntry:
        return DeadLetterEntry(
            id=doc["_id"],
            event_id=doc.get("event_id", ""),
            topic=doc.get("topic", ""),
            attributes=doc.get("attributes", {}),
            reason=doc.get("reason", ""),
            error=doc.get("error", {}),
            failed_at=doc.get("failed_at", datetime.now(UTC)),
        )


__all__ = ["MongoDeadLetterStore"]
