"""Kafka adapter – KafkaRoutingPublisher."""
from __future__ import annotations

import logging
from typing import Any

from pick_request_service.adapters.kafka.serializer import serialize_payload
from pick_request_service.kernel.messaging import RoutingMessage, RoutingPublisher

logger = logging.getLogger(__name__)


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'pick-request-service[kafka]' to use the Kafka adapter") from exc


def message_key(message: RoutingMessage) -> bytes:
    """Partition key: one pick request always lands on the same partition."""
    identifier = (
        message.payload.get("wmsPickRequestIdentifier")
        or message.payload.get("pickRequestIdentifier")
        or ""
    )
    return f"{message.attributes.get('wmsIdentifier', '')}-{identifier}".encode()


class KafkaRoutingPublisher(RoutingPublisher):
    """aiokafka-backed producer implementing ``RoutingPublisher``.

    Message attributes travel as Kafka headers.
    """

    def __init__(self, bootstrap_servers: str, **producer_kwargs: Any) -> None:
        aiokafka = _require_aiokafka()
        self._producer = aiokafka.AIOKafkaProducer(bootstrap_servers=bootstrap_servers, **producer_kwargs)
        self._started = False

    async def start(self) -> None:
        await self._producer.start()
        self._started = True

    async def stop(self) -> None:
        await self._producer.stop()
        self._started = False

    async def __aenter__(self) -> "KafkaRoutingPublisher":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def publish(self, message: RoutingMessage) -> None:
        if not self._started:
            await self.start()
        headers = [(k, str(v).encode()) for k, v in message.attributes.items() if v is not None]
        await self._producer.send_and_wait(
            message.topic,
            value=serialize_payload(message.payload),
            key=message_key(message),
            headers=headers,
        )
        logger.debug("kafka.published topic=%s target=%s", message.topic, message.attributes.get("target"))


__all__ = ["KafkaRoutingPublisher", "message_key"]
