"""Domain – build PickRequest records and partial updates from WMS payloads."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pick_request_service.domain.pick_request import (
    PickRequest,
    PickRequestStatus,
    PickRequestUpdate,
    identifier_text,
)
from pick_request_service.kernel.time import parse_datetime, parse_datetimes

DATE_TIME_FIELDS: tuple[str, ...] = (
    "pickBeforeTime",
    "cutOffTime",
    "service.fromTime",
    "service.toTime",
)


def build_pick_request(
    payload: Mapping[str, Any],
    automation_system_identifier: str,
    wms_identifier: str,
) -> PickRequest:
    """Build the record persisted for a ``create`` event.

    Date-time fields are normalized to aware ``datetime`` values, both
    identifiers are stamped and the status starts at ``requested``.
    *payload* itself is left untouched.
    """
    document = parse_datetimes(payload, DATE_TIME_FIELDS)
    document["wmsIdentifier"] = wms_identifier
    document["automationSystemIdentifier"] = automation_system_identifier
    document["status"] = PickRequestStatus.REQUESTED.value
    return PickRequest.from_document(document)


def build_pick_request_update(payload: Mapping[str, Any]) -> PickRequestUpdate:
    """Build the partial update for an ``update`` event.

    A field missing from (or empty in) the payload is left out of the
    update, so the stored value is kept.
    """
    cut_off_time = payload.get("cutOffTime")
    pick_before_time = payload.get("pickBeforeTime")
    return PickRequestUpdate(
        wms_pick_request_identifier=identifier_text(payload.get("pickRequestIdentifier")),
        cut_off_time=parse_datetime(cut_off_time, "cutOffTime") if cut_off_time else None,
        pick_before_time=parse_datetime(pick_before_time, "pickBeforeTime") if pick_before_time else None,
        handover_location=payload.get("handoverLocation") or None,
        status=PickRequestStatus.MANUALLY_PICKED.value if payload.get("manuallyPicked") else None,
    )


__all__ = ["DATE_TIME_FIELDS", "build_pick_request", "build_pick_request_update"]
