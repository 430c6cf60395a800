"""Redis adapter – RedisInboxStore."""
from __future__ import annotations

from typing import Any

from pick_request_service.kernel.messaging import InboxStore


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'pick-request-service[redis]' to use the Redis adapter") from exc


class RedisInboxStore(InboxStore):
    """Redis-backed set of processed delivery ids (TTL-based expiration)."""

    def __init__(self, client: Any, *, ttl_seconds: int = 7 * 24 * 3600, namespace: str = "pick-request") -> None:
        self._client = client
        self._ttl = ttl_seconds
        self._namespace = namespace

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> RedisInboxStore:
        aioredis = _require_redis()
        return cls(aioredis.from_url(url), **kwargs)

    def _key(self, event_id: str) -> str:
        return f"inbox:{self._namespace}:{event_id}"

    async def has_been_processed(self, event_id: str) -> bool:
        return bool(await self._client.exists(self._key(event_id)))

    async def record(self, event_id: str) -> None:
        await self._client.set(self._key(event_id), b"1", ex=self._ttl)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisInboxStore"]
