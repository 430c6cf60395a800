"""Reconciler – inbound event, operation kinds and outcomes."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    CANCEL = "cancel"

    @classmethod
    def parse(cls, value: str | None) -> Operation | None:
        """Return the matching operation, or ``None`` for anything unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class Outcome(str, Enum):
    """How an inbound message completed.  Errors are raised, never returned."""

    CREATED = "CREATED"
    DUPLICATE_CREATE = "DUPLICATE_CREATE"
    CANCELLATION_REQUESTED = "CANCELLATION_REQUESTED"
    CANCELLATION_SKIPPED = "CANCELLATION_SKIPPED"
    UPDATED = "UPDATED"
    UPDATE_ROUTED = "UPDATE_ROUTED"
    MANUAL_PICK_CANCELLATION = "MANUAL_PICK_CANCELLATION"
    IGNORED = "IGNORED"
    DUPLICATE_DELIVERY = "DUPLICATE_DELIVERY"
    DROPPED = "DROPPED"


@dataclasses.dataclass(frozen=True)
class InboundEvent:
    """One decoded WMS event, built per delivery and discarded afterwards."""

    operation: str | None
    wms_identifier: str
    automation_system_identifier: str
    payload: dict[str, Any]
    attributes: dict[str, str]
    event_id: str


__all__ = ["InboundEvent", "Operation", "Outcome"]
