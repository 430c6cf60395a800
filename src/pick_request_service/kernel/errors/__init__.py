"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ReconciliationError          (kind, retryable)
        ├── MalformedMessageError    (domain.py, not retryable)
        ├── PickRequestNotFoundError (domain.py, not retryable)
        ├── PersistenceError         (infrastructure.py, retryable)
        └── PublishError             (infrastructure.py, retryable)
"""

from pick_request_service.kernel.errors.base import BaseError, ErrorKind, ReconciliationError
from pick_request_service.kernel.errors.domain import MalformedMessageError, PickRequestNotFoundError
from pick_request_service.kernel.errors.infrastructure import PersistenceError, PublishError

__all__ = [
    "BaseError",
    "ErrorKind",
    "MalformedMessageError",
    "PersistenceError",
    "PickRequestNotFoundError",
    "PublishError",
    "ReconciliationError",
]
