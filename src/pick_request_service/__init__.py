"""
pick_request_service – WMS pick-request reconciliation.

Import path convention::

    from pick_request_service.application.ingest import PickRequestMessageProcessor
    from pick_request_service.application.reconciler import OperationReconciler, Outcome
    from pick_request_service.domain import PickRequest, build_pick_request
    from pick_request_service.kernel.errors import ReconciliationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
