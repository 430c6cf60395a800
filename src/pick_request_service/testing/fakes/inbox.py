"""Testing fakes – InMemoryInboxStore."""
from __future__ import annotations

from pick_request_service.kernel.messaging import InboxStore


class InMemoryInboxStore(InboxStore):
    """Set-backed inbox store for tests."""

    def __init__(self, processed: set[str] | None = None) -> None:
        self._processed: set[str] = set(processed or ())

    async def record(self, event_id: str) -> None:
        self._processed.add(event_id)

    async def has_been_processed(self, event_id: str) -> bool:
        return event_id in self._processed

    @property
    def processed(self) -> set[str]:
        return set(self._processed)


__all__ = ["InMemoryInboxStore"]
