"""Application – flawed-message handling."""
from pick_request_service.application.flawed.handler import (
    DEFAULT_MAX_EVENT_AGE,
    FlawedMessageHandler,
    RetryWindowFlawedMessageHandler,
    is_retryable,
)

__all__ = [
    "DEFAULT_MAX_EVENT_AGE",
    "FlawedMessageHandler",
    "RetryWindowFlawedMessageHandler",
    "is_retryable",
]
