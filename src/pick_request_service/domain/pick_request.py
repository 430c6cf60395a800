"""Domain – PickRequest record, partial update and status set.

Records are stored as camelCase documents keyed by
``"<wmsIdentifier>-<wmsPickRequestIdentifier>"``.  Optional fields that are
``None`` are left out of the document instead of being written as null, so a
merge-upsert never clears a value the event did not mention.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from pick_request_service.kernel.time import parse_datetime


class PickRequestStatus(str, Enum):
    REQUESTED = "requested"
    ALLOCATED = "allocated"
    CREATED = "created"
    PICKED = "picked"
    MANUALLY_PICKED = "manually-picked"
    CANCELLATION_REQUESTED = "cancellation-requested"
    CANCELLATION_LOCKED = "cancellation-locked"
    CANCELLED = "cancelled"


CANCELLABLE_STATUSES: frozenset[str] = frozenset(
    {
        PickRequestStatus.ALLOCATED.value,
        PickRequestStatus.REQUESTED.value,
        PickRequestStatus.CREATED.value,
    }
)


def is_cancellable(status: str | None) -> bool:
    return status in CANCELLABLE_STATUSES


def pick_request_key(wms_identifier: str, pick_request_identifier: str) -> str:
    """Composite store key ``"<wmsIdentifier>-<pickRequestIdentifier>"``."""
    return f"{wms_identifier}-{pick_request_identifier}"


def identifier_text(value: Any) -> str:
    """Identifiers are stored and queried as text; WMS payloads may send ``2`` or ``"2"``."""
    return "" if value is None else str(value)


@dataclasses.dataclass
class ServiceWindow:
    """The ``service`` sub-structure of a pick request."""

    from_time: datetime | None = None
    to_time: datetime | None = None
    extra: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> ServiceWindow:
        extra = {k: v for k, v in doc.items() if k not in ("fromTime", "toTime")}
        return cls(
            from_time=parse_datetime(doc.get("fromTime"), "service.fromTime"),
            to_time=parse_datetime(doc.get("toTime"), "service.toTime"),
            extra=extra,
        )

    def to_document(self) -> dict[str, Any]:
        doc = dict(self.extra)
        if self.from_time is not None:
            doc["fromTime"] = self.from_time
        if self.to_time is not None:
            doc["toTime"] = self.to_time
        return doc


# wire name -> attribute name, in document order
_FIELDS: dict[str, str] = {
    "wmsPickRequestIdentifier": "wms_pick_request_identifier",
    "orderReference": "order_reference",
    "pickIdentifier": "pick_identifier",
    "automationPickRequestIdentifier": "automation_pick_request_identifier",
    "cutOffTime": "cut_off_time",
    "pickBeforeTime": "pick_before_time",
    "handoverLocation": "handover_location",
    "service": "service",
    "wmsIdentifier": "wms_identifier",
    "automationSystemIdentifier": "automation_system_identifier",
    "status": "status",
}


@dataclasses.dataclass
class PickRequest:
    """Durable pick-request record.

    ``extra`` keeps every payload key this service does not interpret
    (pick lines, customer data, …) so they survive the round trip to the
    store and on to the routing consumer.
    """

    wms_identifier: str
    wms_pick_request_identifier: str
    automation_system_identifier: str
    status: str
    order_reference: str | None = None
    pick_identifier: str | None = None
    automation_pick_request_identifier: str | None = None
    cut_off_time: datetime | None = None
    pick_before_time: datetime | None = None
    handover_location: dict[str, Any] | None = None
    service: ServiceWindow | None = None
    extra: dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def document_key(self) -> str:
        return pick_request_key(self.wms_identifier, self.wms_pick_request_identifier)

    @property
    def is_cancellable(self) -> bool:
        return is_cancellable(self.status)

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> PickRequest:
        extra = {k: v for k, v in doc.items() if k not in _FIELDS and k != "_id"}
        service = doc.get("service")
        if service is not None and not isinstance(service, Mapping):
            # not a window; kept verbatim
            extra["service"] = service
        return cls(
            wms_identifier=doc.get("wmsIdentifier") or "",
            wms_pick_request_identifier=identifier_text(doc.get("wmsPickRequestIdentifier")),
            automation_system_identifier=doc.get("automationSystemIdentifier") or "",
            status=str(doc.get("status") or ""),
            order_reference=doc.get("orderReference"),
            pick_identifier=doc.get("pickIdentifier"),
            automation_pick_request_identifier=doc.get("automationPickRequestIdentifier"),
            cut_off_time=parse_datetime(doc.get("cutOffTime"), "cutOffTime"),
            pick_before_time=parse_datetime(doc.get("pickBeforeTime"), "pickBeforeTime"),
            handover_location=doc.get("handoverLocation"),
            service=ServiceWindow.from_document(service) if isinstance(service, Mapping) else None,
            extra=extra,
        )

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = dict(self.extra)
        for wire, attr in _FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            doc[wire] = value.to_document() if isinstance(value, ServiceWindow) else value
        return doc


@dataclasses.dataclass(frozen=True)
class PickRequestUpdate:
    """Partial record produced by an ``update`` event.

    Only the fields that are set end up in :meth:`to_document`.
    """

    wms_pick_request_identifier: str
    cut_off_time: datetime | None = None
    pick_before_time: datetime | None = None
    handover_location: dict[str, Any] | None = None
    status: str | None = None

    @property
    def manually_picked(self) -> bool:
        return self.status == PickRequestStatus.MANUALLY_PICKED.value

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"wmsPickRequestIdentifier": self.wms_pick_request_identifier}
        if self.cut_off_time is not None:
            doc["cutOffTime"] = self.cut_off_time
        if self.pick_before_time is not None:
            doc["pickBeforeTime"] = self.pick_before_time
        if self.handover_location is not None:
            doc["handoverLocation"] = self.handover_location
        if self.status is not None:
            doc["status"] = self.status
        return doc


__all__ = [
    "CANCELLABLE_STATUSES",
    "PickRequest",
    "PickRequestStatus",
    "PickRequestUpdate",
    "ServiceWindow",
    "identifier_text",
    "is_cancellable",
    "pick_request_key",
]
