"""MongoDB adapter – pick-request store and dead-letter store."""
from pick_request_service.adapters.mongodb.dead_letter import MongoDeadLetterStore
from pick_request_service.adapters.mongodb.repository import MongoPickRequestRepository

__all__ = ["MongoDeadLetterStore", "MongoPickRequestRepository"]
