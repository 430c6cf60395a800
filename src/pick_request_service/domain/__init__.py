"""Domain – pick-request model, builders and store port."""
from pick_request_service.domain.automation import (
    DEFAULT_KNOWN_AUTOMATION_SYSTEMS,
    automation_system_type,
    is_known_automation_system,
)
from pick_request_service.domain.builder import (
    DATE_TIME_FIELDS,
    build_pick_request,
    build_pick_request_update,
)
from pick_request_service.domain.pick_request import (
    CANCELLABLE_STATUSES,
    PickRequest,
    PickRequestStatus,
    PickRequestUpdate,
    ServiceWindow,
    identifier_text,
    is_cancellable,
    pick_request_key,
)
from pick_request_service.domain.repository import PickRequestRepository

__all__ = [
    "CANCELLABLE_STATUSES",
    "DATE_TIME_FIELDS",
    "DEFAULT_KNOWN_AUTOMATION_SYSTEMS",
    "PickRequest",
    "PickRequestRepository",
    "PickRequestStatus",
    "PickRequestUpdate",
    "ServiceWindow",
    "automation_system_type",
    "build_pick_request",
    "build_pick_request_update",
    "identifier_text",
    "is_cancellable",
    "is_known_automation_system",
    "pick_request_key",
]
