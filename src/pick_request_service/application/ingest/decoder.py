"""Ingest – decode inbound message data into a JSON object payload."""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from pick_request_service.kernel.errors import MalformedMessageError

INVALID_DATA_MESSAGE = "Message does not contain valid data."


class PayloadDecoder:
    """Turn bus message ``data`` into a non-empty ``dict``.

    Accepts raw JSON (``bytes`` or ``str``), base64-encoded JSON as delivered
    by Pub/Sub push subscriptions, or an already decoded ``dict``.  Anything
    that does not end up as a non-empty JSON object raises
    :class:`MalformedMessageError`.
    """

    def decode(self, data: bytes | str | dict[str, Any] | None) -> dict[str, Any]:
        if isinstance(data, dict):
            payload: Any = data
        elif isinstance(data, (bytes, str)):
            raw = data.encode() if isinstance(data, str) else data
            payload = self._loads(raw.strip())
        else:
            raise MalformedMessageError(INVALID_DATA_MESSAGE, detail={"type": type(data).__name__})

        if not isinstance(payload, dict) or not payload:
            raise MalformedMessageError(INVALID_DATA_MESSAGE)
        return payload

    def _loads(self, raw: bytes) -> Any:
        if not raw:
            raise MalformedMessageError(INVALID_DATA_MESSAGE)
        if raw[:1] not in (b"{", b"["):
            try:
                raw = base64.b64decode(raw, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise MalformedMessageError(INVALID_DATA_MESSAGE, cause=exc) from exc
        try:
            return json.loads(raw)
        except (UnicodeDecodeError, ValueError) as exc:
            raise MalformedMessageError(INVALID_DATA_MESSAGE, cause=exc) from exc


__all__ = ["INVALID_DATA_MESSAGE", "PayloadDecoder"]
