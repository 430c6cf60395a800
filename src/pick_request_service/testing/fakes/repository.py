"""Testing fakes – InMemoryPickRequestRepository."""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pick_request_service.domain import PickRequest, PickRequestRepository


class InMemoryPickRequestRepository(PickRequestRepository):
    """Dict-backed pick-request store with merge-upsert semantics.

    ``fail_get_with`` / ``fail_upsert_with`` make the next calls raise the
    given exception.
    """

    def __init__(
        self,
        documents: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        fail_get_with: Exception | None = None,
        fail_upsert_with: Exception | None = None,
    ) -> None:
        self._documents: dict[str, dict[str, Any]] = {k: dict(v) for k, v in (documents or {}).items()}
        self.fail_get_with = fail_get_with
        self.fail_upsert_with = fail_upsert_with
        self.upserts: list[tuple[str, dict[str, Any]]] = []

    async def get(self, identifier: str, wms_identifier: str) -> PickRequest | None:
        if self.fail_get_with is not None:
            raise self.fail_get_with
        for doc in self._documents.values():
            if doc.get("wmsPickRequestIdentifier") == identifier and doc.get("wmsIdentifier") == wms_identifier:
                return PickRequest.from_document(doc)
        return None

    async def upsert(self, key: str, document: Mapping[str, Any]) -> str:
        if self.fail_upsert_with is not None:
            raise self.fail_upsert_with
        self.upserts.append((key, copy.deepcopy(dict(document))))
        self._documents.setdefault(key, {}).update(copy.deepcopy(dict(document)))
        return key

    def document(self, key: str) -> dict[str, Any] | None:
        doc = self._documents.get(key)
        return dict(doc) if doc is not None else None

    def all_keys(self) -> list[str]:
        return list(self._documents.keys())


__all__ = ["InMemoryPickRequestRepository"]
