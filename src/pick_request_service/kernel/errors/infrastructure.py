"""Infrastructure errors – store and bus I/O failures."""

from __future__ import annotations

from typing import Any

from pick_request_service.kernel.errors.base import ErrorKind, ReconciliationError


class PersistenceError(ReconciliationError):
    """Reading or writing the pick-request store failed."""

    default_code = "persistence_failure"
    kind = ErrorKind.PERSISTENCE_FAILURE
    retryable = True

    def __init__(
        self,
        message: str = "Could not save to store.",
        *,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        if key is not None:
            self.detail.setdefault("key", key)


class PublishError(ReconciliationError):
    """Publishing to the routing topic failed.

    May happen after the store mutation already took effect.
    """

    default_code = "publish_failure"
    kind = ErrorKind.PUBLISH_FAILURE
    retryable = True

    def __init__(
        self,
        message: str = "Could not publish message for routing service.",
        *,
        topic: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.topic = topic
        if topic is not None:
            self.detail.setdefault("topic", topic)


__all__ = ["PersistenceError", "PublishError"]
