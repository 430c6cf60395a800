"""MongoDB adapter – MongoPickRequestRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pick_request_service.domain import PickRequest, PickRequestRepository


def _require_motor() -> Any:
    try:
        import motor.motor_asyncio as motor_asyncio
        return motor_asyncio
    except ImportError as exc:
        raise ImportError("Install 'pick-request-service[mongodb]' to use the MongoDB adapter") from exc


class MongoPickRequestRepository(PickRequestRepository):
    """Pick-request store backed by a motor collection.

    Documents use the composite key (``"<wmsIdentifier>-<id>"``) as ``_id``.
    :meth:`upsert` is a ``$set`` merge, so fields missing from the partial
    document keep their stored value.  Call :meth:`create_indexes` once on
    startup.
    """

    COLLECTION_NAME = "pick-request"

    def __init__(self, collection: Any) -> None:
        self._col = collection

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str,
        collection: str = COLLECTION_NAME,
        **client_kwargs: Any,
    ) -> MongoPickRequestRepository:
        motor_asyncio = _require_motor()
        client = motor_asyncio.AsyncIOMotorClient(url, tz_aware=True, **client_kwargs)
        return cls(client[database][collection])

    @classmethod
    async def create_indexes(cls, collection: Any) -> None:
        """Create the lookup index.  Idempotent."""
        await collection.create_index(
            [("wmsIdentifier", 1), ("wmsPickRequestIdentifier", 1)],
            name="idx_pick_request_identity",
        )

    async def get(self, identifier: str, wms_identifier: str) -> PickRequest | None:
        doc = await self._col.find_one(
            {"wmsPickRequestIdentifier": identifier, "wmsIdentifier": wms_identifier}
        )
        return PickRequest.from_document(doc) if doc is not None else None

    async def upsert(self, key: str, document: Mapping[str, Any]) -> str:
        await self._col.update_one({"_id": key}, {"$set": dict(document)}, upsert=True)
        return key


__all__ = ["MongoPickRequestRepository"]
