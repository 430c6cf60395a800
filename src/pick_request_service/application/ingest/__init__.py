"""Application – inbound message ingestion."""
from pick_request_service.application.ingest.decoder import INVALID_DATA_MESSAGE, PayloadDecoder
from pick_request_service.application.ingest.processor import (
    DEFAULT_SUBSCRIPTION,
    PickRequestMessageProcessor,
)

__all__ = [
    "DEFAULT_SUBSCRIPTION",
    "INVALID_DATA_MESSAGE",
    "PayloadDecoder",
    "PickRequestMessageProcessor",
]
