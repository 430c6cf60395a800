"""Service wiring – build a ready-to-use message processor from settings.

Example::

    settings = EnvSettingsLoader().load(ServiceSettings)
    configure_logging(settings.log_level)
    processor = build_processor(settings)

    outcome = await processor.process(
        InboundMessage(data=body["message"]["data"], attributes=body["message"]["attributes"]),
        Delivery(event_id=body["message"]["messageId"], timestamp=published_at),
    )
"""
from __future__ import annotations

from datetime import timedelta

from pick_request_service.application.flawed import FlawedMessageHandler, RetryWindowFlawedMessageHandler
from pick_request_service.application.ingest import PickRequestMessageProcessor
from pick_request_service.application.reconciler import OperationReconciler
from pick_request_service.config import ServiceSettings
from pick_request_service.domain import PickRequestRepository
from pick_request_service.kernel.messaging import DeadLetterStore, InboxStore, RoutingPublisher
from pick_request_service.kernel.time import Clock
from pick_request_service.observability.logging import get_logger
from pick_request_service.observability.tracing import NoopTracer, Tracer

logger = get_logger(__name__)


def build_processor(
    settings: ServiceSettings,
    *,
    repository: PickRequestRepository | None = None,
    inbox: InboxStore | None = None,
    publisher: RoutingPublisher | None = None,
    dead_letters: DeadLetterStore | None = None,
    flawed_message_handler: FlawedMessageHandler | None = None,
    tracer: Tracer | None = None,
    clock: Clock | None = None,
) -> PickRequestMessageProcessor:
    """Wire a :class:`PickRequestMessageProcessor`.

    Collaborators that are not passed in are built from *settings*:
    MongoDB store, Redis inbox, Kafka publisher, MongoDB dead-letter store
    and the no-op tracer.
    """
    if repository is None:
        from pick_request_service.adapters.mongodb import MongoPickRequestRepository

        repository = MongoPickRequestRepository.from_url(
            settings.mongo_url, settings.mongo_database, settings.collection
        )
    if inbox is None:
        from pick_request_service.adapters.redis import RedisInboxStore

        inbox = RedisInboxStore.from_url(
            settings.redis_url,
            ttl_seconds=settings.dedup_ttl_seconds,
            namespace=settings.service_name,
        )
    if publisher is None:
        from pick_request_service.adapters.kafka import KafkaRoutingPublisher

        publisher = KafkaRoutingPublisher(settings.kafka_bootstrap_servers)
    if flawed_message_handler is None:
        if dead_letters is None:
            from pick_request_service.adapters.mongodb import MongoDeadLetterStore

            dead_letters = MongoDeadLetterStore.from_url(
                settings.mongo_url, settings.mongo_database, settings.dead_letter_collection
            )
        flawed_message_handler = RetryWindowFlawedMessageHandler(
            dead_letters,
            max_event_age=timedelta(seconds=settings.max_event_age_seconds),
            clock=clock,
            source_topic=settings.source_topic,
        )

    logger.info("pick_request.service_configured", settings=settings.as_log_dict())
    reconciler = OperationReconciler(
        repository,
        publisher,
        routing_topic=settings.routing_topic,
        known_automation_systems=settings.known_automation_systems,
    )
    return PickRequestMessageProcessor(
        reconciler,
        inbox,
        flawed_message_handler,
        tracer=tracer or NoopTracer(),
        subscription=settings.subscription,
    )


__all__ = ["build_processor"]
