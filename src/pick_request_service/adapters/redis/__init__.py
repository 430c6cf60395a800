"""Redis adapter – inbox (deduplication) store."""
from pick_request_service.adapters.redis.inbox import RedisInboxStore

__all__ = ["RedisInboxStore"]
