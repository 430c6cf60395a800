"""Application – operation reconciler."""
from pick_request_service.application.reconciler.event import InboundEvent, Operation, Outcome
from pick_request_service.application.reconciler.reconciler import (
    CARRIED_FORWARD_FIELDS,
    DEFAULT_ROUTING_TOPIC,
    OperationReconciler,
)

__all__ = [
    "CARRIED_FORWARD_FIELDS",
    "DEFAULT_ROUTING_TOPIC",
    "InboundEvent",
    "Operation",
    "OperationReconciler",
    "Outcome",
]
