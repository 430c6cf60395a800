"""Kernel time – wire date-time normalization.

WMS payloads carry instants as ISO-8601 strings (``"2021-10-08T22:00:00Z"``).
They are stored as timezone-aware ``datetime`` values.  An absent value
stays absent; it is never replaced by "now" or the epoch.
"""
from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from pick_request_service.kernel.errors import MalformedMessageError


def parse_datetime(value: Any, field: str | None = None) -> datetime | None:
    """Return *value* as an aware ``datetime`` (naive input is taken as UTC).

    Raises :class:`MalformedMessageError` when *value* is not an instant.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise MalformedMessageError(
                f"Invalid date-time value for '{field or 'value'}': {value!r}",
                detail={"field": field, "value": value},
                cause=exc,
            ) from exc
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    raise MalformedMessageError(
        f"Invalid date-time value for '{field or 'value'}': {value!r}",
        detail={"field": field, "value": repr(value)},
    )


def parse_datetimes(payload: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Return a deep copy of *payload* with each dotted path in *fields* normalized.

    ``parse_datetimes(p, ["cutOffTime", "service.fromTime"])`` converts
    ``p["cutOffTime"]`` and ``p["service"]["fromTime"]``.  Paths whose key or
    intermediate mapping is missing are skipped.
    """
    result: dict[str, Any] = copy.deepcopy(dict(payload))
    for path in fields:
        *parents, leaf = path.split(".")
        node: Any = result
        for part in parents:
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                break
        if not isinstance(node, dict) or leaf not in node:
            continue
        node[leaf] = parse_datetime(node[leaf], field=path)
    return result


__all__ = ["parse_datetime", "parse_datetimes"]
