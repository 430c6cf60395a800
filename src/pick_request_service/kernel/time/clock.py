"""Kernel time – clocks and event age.

The retry window of the flawed-message handler is measured against a
:class:`Clock`, so tests can pin "now" with :class:`FrozenClock`.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, always timezone-aware (UTC)."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock stuck at *fixed* until :meth:`advance` moves it."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        self._fixed += timedelta(**kwargs)


def event_age(clock: Clock, published_at: datetime) -> timedelta:
    """Time elapsed since *published_at* (naive values are read as UTC)."""
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=UTC)
    return clock.now() - published_at


__all__ = ["Clock", "FrozenClock", "SystemClock", "event_age"]
