"""Kernel time – clocks and date-time normalization."""
from pick_request_service.kernel.time.clock import Clock, FrozenClock, SystemClock, event_age
from pick_request_service.kernel.time.datetimes import parse_datetime, parse_datetimes

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "event_age",
    "parse_datetime",
    "parse_datetimes",
]
