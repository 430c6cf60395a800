"""Config settings – ServiceSettings for the pick-request service."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pick_request_service.config.settings.base import Settings
from pick_request_service.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ServiceSettings(Settings):
    """Runtime settings, read from ``PICK_REQUEST_*`` environment variables."""

    _prefix: ClassVar[str] = "PICK_REQUEST"

    service_name: str = "pick-request-service"
    subscription: str = "pick-request-topic-subscription"
    source_topic: str = "pick-request-topic"
    routing_topic: str = "routing-topic"
    collection: str = "pick-request"
    dead_letter_collection: str = "pick-request-dead-letter"
    known_automation_systems: list[str] = dataclasses.field(default_factory=lambda: ["iws"])
    dedup_ttl_seconds: int = 7 * 24 * 3600
    max_event_age_seconds: int = 3600
    log_level: str = "INFO"
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "pick_requests"
    redis_url: str = "redis://localhost:6379/0"
    kafka_bootstrap_servers: str = "localhost:9092"

    def _validate(self) -> None:
        for name in ("subscription", "source_topic", "routing_topic", "collection", "dead_letter_collection"):
            if not getattr(self, name).strip():
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")
        self.known_automation_systems = [s.strip().lower() for s in self.known_automation_systems if s.strip()]
        if not self.known_automation_systems:
            raise InvalidSettingValueError("known_automation_systems", [], "must name at least one system")
        for name in ("dedup_ttl_seconds", "max_event_age_seconds"):
            if getattr(self, name) <= 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must be positive")


__all__ = ["ServiceSettings"]
