"""Root error classes for the pick-request error hierarchy."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class ErrorKind(str, Enum):
    """Failure classification consumed by the flawed-message handler."""

    MALFORMED_MESSAGE = "MALFORMED_MESSAGE"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    PUBLISH_FAILURE = "PUBLISH_FAILURE"


class ReconciliationError(BaseError):
    """A failure while reconciling one inbound pick-request event.

    Subclasses pin ``kind`` and ``retryable``.  The reconciler only
    classifies; whether a message is redelivered is decided by the
    flawed-message handler.
    """

    default_code = "reconciliation_error"
    kind: ErrorKind
    retryable: bool = False

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        kind = getattr(self, "kind", None)
        base["kind"] = kind.value if kind is not None else None
        base["retryable"] = self.retryable
        return base


__all__ = ["BaseError", "ErrorKind", "ReconciliationError"]
