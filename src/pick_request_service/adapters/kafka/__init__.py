"""Kafka adapter – routing publisher."""
from pick_request_service.adapters.kafka.publisher import KafkaRoutingPublisher, message_key
from pick_request_service.adapters.kafka.serializer import serialize_payload

__all__ = ["KafkaRoutingPublisher", "message_key", "serialize_payload"]
