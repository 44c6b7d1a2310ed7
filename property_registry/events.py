"""In-process event bus for registry domain events."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Protocol

from property_registry.models.base import Event, Principal
from property_registry.models.enums import EventType, PropertyStatus, TransactionKind

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    """Anything that can receive registry events."""

    def write_event(self, event: Event) -> None: ...


class EventBus:
    """Append-only, emission-ordered event log with fan-out to sinks.

    The bus itself does no locking; the registry publishes while holding
    its own lock, so ``events`` order matches mutation order. Subscription
    changes replace the sink list rather than mutating it, so a publish in
    progress keeps delivering to the sinks it started with.

    Parameters
    ----------
    source : str
        Value stamped into each event's ``source`` field.
    """

    def __init__(self, source: str = "property-registry") -> None:
        self.source = source
        self._events: list[Event] = []
        self._sinks: list[EventSink] = []
        self.delivery_failures = 0

    @property
    def events(self) -> list[Event]:
        """Copy of all events published so far, oldest first."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def subscribe(self, sink: EventSink) -> None:
        """Register a sink to receive every subsequently published event."""
        self._sinks = [*self._sinks, sink]

    def unsubscribe(self, sink: EventSink) -> None:
        """Stop delivering events to ``sink``; no-op if not subscribed."""
        self._sinks = [s for s in self._sinks if s is not sink]

    def publish(self, event_type: EventType, location: str, data: dict[str, Any]) -> Event:
        """Record an event and deliver it to all sinks.

        A failing sink is logged and counted; the event stays in the log
        and the remaining sinks still receive it.
        """
        event = Event(
            event_id=uuid.uuid4().hex,
            event_type=event_type.value,
            event_time=datetime.now(timezone.utc),
            source=self.source,
            subject=location,
            data=data,
        )
        self._events.append(event)
        logger.debug(
            "Published %s for %s",
            event.event_type,
            location,
            extra={"location": location, "event_id": event.event_id},
        )

        for sink in self._sinks:
            try:
                sink.write_event(event)
            except Exception:
                self.delivery_failures += 1
                logger.exception("Sink %s failed to deliver %s", type(sink).__name__, event.event_id)
        return event

    # Typed helpers, one per domain event

    def ownership_transferred(self, location: str, previous: Principal, new: Principal) -> Event:
        return self.publish(
            EventType.OWNERSHIP_TRANSFERRED,
            location,
            {"location": location, "from": previous, "to": new},
        )

    def status_changed(self, location: str, status: PropertyStatus) -> Event:
        return self.publish(
            EventType.STATUS_CHANGED,
            location,
            {"location": location, "status": status.value},
        )

    def transaction_created(self, location: str, kind: TransactionKind, price: int) -> Event:
        return self.publish(
            EventType.TRANSACTION_CREATED,
            location,
            {"location": location, "kind": kind.value, "price": price},
        )
