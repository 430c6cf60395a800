"""Kafka adapter – JSON serialisation of routing payloads."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def serialize_payload(payload: Any) -> bytes:
    """JSON-encode *payload*; ``datetime`` values become ISO-8601 strings."""
    if isinstance(payload, bytes):
        return payload
    return json.dumps(payload, default=_default).encode()


__all__ = ["serialize_payload"]
