"""Kernel messaging – dead-letter port for messages that will not be retried."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4


@dataclasses.dataclass
class DeadLetterEntry:
    """A message whose redelivery was stopped by the flawed-message handler."""

    id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    event_id: str = ""
    topic: str = ""
    attributes: dict[str, str] = dataclasses.field(default_factory=dict)
    reason: str = ""
    error: dict[str, Any] = dataclasses.field(default_factory=dict)
    failed_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))


class DeadLetterStore(abc.ABC):
    """Port: persistence for dead-lettered messages."""

    @abc.abstractmethod
    async def push(self, entry: DeadLetterEntry) -> None:
        """Persist a dropped message."""
        ...

    @abc.abstractmethod
    async def list(self, limit: int = 100) -> list[DeadLetterEntry]:
        """Return at most *limit* dead-letter entries (oldest first)."""
        ...


__all__ = ["DeadLetterEntry", "DeadLetterStore"]
