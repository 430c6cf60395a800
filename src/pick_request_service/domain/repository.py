"""Domain – pick-request store port."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any

from pick_request_service.domain.pick_request import PickRequest


class PickRequestRepository(abc.ABC):
    """Port: durable pick-request document store."""

    @abc.abstractmethod
    async def get(self, identifier: str, wms_identifier: str) -> PickRequest | None:
        """Return the record whose ``wmsPickRequestIdentifier`` is *identifier*
        within *wms_identifier*, or ``None``."""

    @abc.abstractmethod
    async def upsert(self, key: str, document: Mapping[str, Any]) -> str:
        """Merge *document* into the record stored at *key* (creating it when
        absent) and return the stored document id."""


__all__ = ["PickRequestRepository"]
