"""Domain errors – bad input and unknown pick requests (never retried)."""

from __future__ import annotations

from typing import Any

from pick_request_service.kernel.errors.base import ErrorKind, ReconciliationError


class MalformedMessageError(ReconciliationError):
    """Missing/empty/unparseable payload or missing envelope attributes."""

    default_code = "malformed_message"
    kind = ErrorKind.MALFORMED_MESSAGE
    retryable = False


class PickRequestNotFoundError(ReconciliationError):
    """An update or cancel referenced a pick request that was never created."""

    default_code = "pick_request_not_found"
    kind = ErrorKind.NOT_FOUND
    retryable = False

    def __init__(
        self,
        identifier: Any,
        wms_identifier: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"Could not find pick request with ID: {identifier}", **kwargs)
        self.identifier = identifier
        self.wms_identifier = wms_identifier
        self.detail.setdefault("pickRequestIdentifier", identifier)
        if wms_identifier is not None:
            self.detail.setdefault("wmsIdentifier", wms_identifier)


__all__ = ["MalformedMessageError", "PickRequestNotFoundError"]
