"""Testing fakes – in-memory doubles for the service ports."""
from pick_request_service.kernel.time import FrozenClock
from pick_request_service.testing.fakes.dead_letter import InMemoryDeadLetterStore, RecordingFlawedMessageHandler
from pick_request_service.testing.fakes.inbox import InMemoryInboxStore
from pick_request_service.testing.fakes.publisher import InMemoryRoutingPublisher
from pick_request_service.testing.fakes.repository import InMemoryPickRequestRepository

__all__ = [
    "FrozenClock",
    "InMemoryDeadLetterStore",
    "InMemoryInboxStore",
    "InMemoryPickRequestRepository",
    "InMemoryRoutingPublisher",
    "RecordingFlawedMessageHandler",
]
