"""Kernel messaging – inbox (deduplication) port."""
from __future__ import annotations

import abc


class InboxStore(abc.ABC):
    """Port: remembers which delivery ids have already been processed.

    Deduplication is per physical delivery, not per logical payload: a
    ``create`` followed by an ``update`` for the same pick request are two
    distinct events and both must be processed.
    """

    @abc.abstractmethod
    async def record(self, event_id: str) -> None:
        """Persist *event_id* as processed."""
        ...

    @abc.abstractmethod
    async def has_been_processed(self, event_id: str) -> bool:
        """Return ``True`` if *event_id* was already recorded."""
        ...


__all__ = ["InboxStore"]
