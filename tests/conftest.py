"""Shared pytest fixtures."""
from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from pick_request_service.observability.correlation import MessageContextVar


@pytest.fixture(autouse=True)
def _reset_ambient_state() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    MessageContextVar.clear()
    yield
    MessageContextVar.clear()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
