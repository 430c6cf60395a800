"""Reconciler – applies create/update/cancel events to the pick-request store.

Transition rules
----------------
create
    Persist a new record (status ``requested``) and route it.  A record that
    already exists means the WMS sent the create twice: warn and do nothing.
cancel
    Route a cancellation when the stored status is cancellable.  The stored
    status is left alone; the routing consumer moves it to
    ``cancellation-requested``.
update
    Merge the fields present in the payload into the stored record, then
    route it when it was manually picked out of a cancellable state, or when
    the automation system is on the auto-forward allow-list.
"""
from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from pick_request_service.application.reconciler.event import InboundEvent, Operation, Outcome
from pick_request_service.domain import (
    DEFAULT_KNOWN_AUTOMATION_SYSTEMS,
    PickRequest,
    PickRequestRepository,
    build_pick_request,
    build_pick_request_update,
    identifier_text,
    is_known_automation_system,
    pick_request_key,
)
from pick_request_service.kernel.errors import (
    MalformedMessageError,
    PersistenceError,
    PickRequestNotFoundError,
    PublishError,
    ReconciliationError,
)
from pick_request_service.kernel.messaging import RoutingMessage, RoutingPublisher
from pick_request_service.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ROUTING_TOPIC = "routing-topic"

# never supplied by update events; copied from the stored record
CARRIED_FORWARD_FIELDS: dict[str, str] = {
    "automationPickRequestIdentifier": "automation_pick_request_identifier",
    "orderReference": "order_reference",
    "pickIdentifier": "pick_identifier",
}


def _require(payload: Mapping[str, Any], field: str) -> str:
    value = payload.get(field)
    if value is None or value == "":
        raise MalformedMessageError(
            f"Payload is missing '{field}'.",
            detail={"field": field},
        )
    return identifier_text(value)


class OperationReconciler:
    """Dispatches an :class:`InboundEvent` on its ``operation`` attribute."""

    def __init__(
        self,
        repository: PickRequestRepository,
        publisher: RoutingPublisher,
        *,
        routing_topic: str = DEFAULT_ROUTING_TOPIC,
        known_automation_systems: Collection[str] = DEFAULT_KNOWN_AUTOMATION_SYSTEMS,
    ) -> None:
        self._repository = repository
        self._publisher = publisher
        self._routing_topic = routing_topic
        self._known = frozenset(s.lower() for s in known_automation_systems)

    async def reconcile(self, event: InboundEvent) -> Outcome:
        operation = Operation.parse(event.operation)
        if operation is None:
            logger.debug("pick_request.operation_ignored", operation=event.operation)
            return Outcome.IGNORED
        if operation is Operation.CREATE:
            return await self._create(event)
        if operation is Operation.CANCEL:
            return await self._cancel(event)
        return await self._update(event)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def _create(self, event: InboundEvent) -> Outcome:
        identifier = _require(event.payload, "wmsPickRequestIdentifier")
        key = pick_request_key(event.wms_identifier, identifier)

        if await self._get(identifier, event.wms_identifier) is not None:
            logger.warning("pick_request.duplicate_create", key=key)
            return Outcome.DUPLICATE_CREATE

        pick_request = build_pick_request(
            event.payload,
            event.automation_system_identifier,
            event.wms_identifier,
        )
        document = pick_request.to_document()
        document_id = await self._upsert(key, document)
        logger.info(
            "pick_request.created",
            key=key,
            document_id=document_id,
            status=pick_request.status,
        )
        await self._publish(document, event.attributes, target=event.automation_system_identifier)
        return Outcome.CREATED

    async def _cancel(self, event: InboundEvent) -> Outcome:
        identifier = _require(event.payload, "pickRequestIdentifier")
        pick_request = await self._load(identifier, event.wms_identifier)

        if not pick_request.is_cancellable:
            logger.info(
                "pick_request.cancellation_skipped",
                key=pick_request.document_key,
                status=pick_request.status,
            )
            return Outcome.CANCELLATION_SKIPPED

        logger.info(
            "pick_request.cancellation_requested",
            key=pick_request.document_key,
            status=pick_request.status,
        )
        await self._publish(
            pick_request.to_document(),
            event.attributes,
            target=pick_request.automation_system_identifier,
        )
        return Outcome.CANCELLATION_REQUESTED

    async def _update(self, event: InboundEvent) -> Outcome:
        identifier = _require(event.payload, "pickRequestIdentifier")
        stored = await self._load(identifier, event.wms_identifier)

        outgoing = dict(event.payload)
        for wire, attr in CARRIED_FORWARD_FIELDS.items():
            value = getattr(stored, attr)
            if value is not None:
                outgoing[wire] = value

        update = build_pick_request_update(event.payload)
        key = pick_request_key(event.wms_identifier, identifier)
        await self._upsert(key, update.to_document())

        outcome = Outcome.UPDATED
        if update.manually_picked:
            if stored.is_cancellable:
                await self._publish(outgoing, event.attributes, target=event.automation_system_identifier)
                outcome = Outcome.MANUAL_PICK_CANCELLATION
        elif is_known_automation_system(event.automation_system_identifier, self._known):
            outgoing["manuallyPicked"] = False
            await self._publish(outgoing, event.attributes, target=event.automation_system_identifier)
            outcome = Outcome.UPDATE_ROUTED

        logger.info(
            "pick_request.updated",
            key=key,
            previous_status=stored.status,
            manually_picked=update.manually_picked,
            outcome=outcome.value,
        )
        return outcome

    # ------------------------------------------------------------------
    # Store / bus access with failure classification
    # ------------------------------------------------------------------

    async def _get(self, identifier: str, wms_identifier: str) -> PickRequest | None:
        try:
            return await self._repository.get(identifier, wms_identifier)
        except MalformedMessageError as exc:
            # the stored document, not the event, is unreadable
            raise PersistenceError(
                "Stored record could not be read.",
                key=pick_request_key(wms_identifier, identifier),
                cause=exc,
            ) from exc
        except ReconciliationError:
            raise
        except Exception as exc:
            raise PersistenceError(
                "Could not read from store.",
                key=pick_request_key(wms_identifier, identifier),
                cause=exc,
            ) from exc

    async def _load(self, identifier: str, wms_identifier: str) -> PickRequest:
        pick_request = await self._get(identifier, wms_identifier)
        if pick_request is None:
            raise PickRequestNotFoundError(identifier, wms_identifier)
        return pick_request

    async def _upsert(self, key: str, document: dict[str, Any]) -> str:
        try:
            return await self._repository.upsert(key, document)
        except ReconciliationError:
            raise
        except Exception as exc:
            raise PersistenceError("Could not save to store.", key=key, cause=exc) from exc

    async def _publish(
        self,
        payload: dict[str, Any],
        attributes: Mapping[str, str],
        *,
        target: str,
    ) -> None:
        # inbound attributes override the computed target
        message = RoutingMessage(
            topic=self._routing_topic,
            payload=payload,
            attributes={"target": target, **attributes},
        )
        try:
            await self._publisher.publish(message)
        except ReconciliationError:
            raise
        except Exception as exc:
            raise PublishError(topic=self._routing_topic, cause=exc) from exc


__all__ = ["CARRIED_FORWARD_FIELDS", "DEFAULT_ROUTING_TOPIC", "OperationReconciler"]
