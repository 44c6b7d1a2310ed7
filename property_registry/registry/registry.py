"""Property registry: records, ownership and status under one access gate."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

from property_registry.config import RegistryConfig
from property_registry.events import EventBus
from property_registry.exceptions import (
    AlreadyExistsError,
    AlreadyPricedError,
    InvalidArgumentError,
    RecordNotFoundError,
    UnauthorizedError,
)
from property_registry.models.base import CallerContext, Principal
from property_registry.models.enums import PropertyStatus
from property_registry.models.property import PropertyRecord, PropertySnapshot
from property_registry.registry.access import AccessControlList
from property_registry.registry.ancillary import AncillaryStores
from property_registry.registry.inventory import PropertyInventory

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PropertyRegistry:
    """Single owned aggregate for all property state.

    Holds the records, the access-control list, the inventory and the
    ancillary stores, all serialized by one re-entrant lock. Every
    operation checks its preconditions before touching state, so a
    rejected call leaves everything unchanged and publishes no event.

    Record-level operations are allowed for the record's current owner
    or any principal authorized in the access-control list. Registration
    requires an access-control entry.

    Parameters
    ----------
    admin : Principal
        Principal allowed to change the access-control list.
    gate_ancillary_reads : bool
        Require authorization for ancillary store reads.
    event_bus : EventBus | None
        Bus receiving domain events. A fresh one is created by default.
    """

    def __init__(
        self,
        admin: Principal,
        *,
        gate_ancillary_reads: bool = True,
        event_bus: EventBus | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._records: dict[str, PropertyRecord] = {}
        self.acl = AccessControlList(admin, self._lock)
        self.inventory = PropertyInventory(self.acl, self._lock)
        self.ancillary = AncillaryStores(self.acl, self._lock, gate_ancillary_reads)
        self.events = event_bus if event_bus is not None else EventBus()

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "PropertyRegistry":
        """Build a registry from configuration."""
        return cls(
            config.admin,
            gate_ancillary_reads=config.gate_ancillary_reads,
            event_bus=EventBus(source=config.event_source),
        )

    # --- Registration ---

    def register_property(
        self,
        ctx: CallerContext,
        location: str,
        price: int,
        description: str,
        area: int,
        is_used: bool,
        legal_documents: str,
    ) -> None:
        """Create a record owned by the caller, initially for sale."""
        with self._lock:
            self.acl.require_authorized(ctx, "register properties")
            if location in self._records:
                logger.warning(
                    "Rejected registration of %s: already registered",
                    location,
                    extra={"location": location, "kind": AlreadyExistsError.kind},
                )
                raise AlreadyExistsError(f"Property {location} already registered")
            if not location:
                raise InvalidArgumentError("Location must not be empty")
            _check_amount("price", price)
            if not _is_int(area) or area <= 0:
                raise InvalidArgumentError(f"Area must be a positive integer, got {area!r}")

            now = _now()
            self._records[location] = PropertyRecord(
                location=location,
                owner=ctx.principal,
                price=price,
                description=description,
                area=area,
                legal_documents=legal_documents,
                is_used=is_used,
                created_at=now,
                updated_at=now,
            )
        logger.info(
            "Registered %s (area=%d, price=%d)",
            location,
            area,
            price,
            extra={"location": location, "principal": ctx.principal},
        )

    # --- Flags and text fields ---

    def set_inspected(self, ctx: CallerContext, location: str, value: bool) -> None:
        with self._lock:
            record = self._require_access(ctx, location, "set inspection flag")
            record.is_inspected = value
            record.updated_at = _now()
        logger.info("Set inspected=%s on %s", value, location, extra={"location": location})

    def set_viewed(self, ctx: CallerContext, location: str, value: bool) -> None:
        with self._lock:
            record = self._require_access(ctx, location, "set viewing flag")
            record.is_viewed = value
            record.updated_at = _now()
        logger.info("Set viewed=%s on %s", value, location, extra={"location": location})

    def set_used(self, ctx: CallerContext, location: str, value: bool) -> None:
        with self._lock:
            record = self._require_access(ctx, location, "set used flag")
            record.is_used = value
            record.updated_at = _now()
        logger.info("Set used=%s on %s", value, location, extra={"location": location})

    def set_description(self, ctx: CallerContext, location: str, description: str) -> None:
        with self._lock:
            record = self._require_access(ctx, location, "set description")
            record.description = description
            record.updated_at = _now()
        logger.info("Updated description of %s", location, extra={"location": location})

    def set_legal_documents(self, ctx: CallerContext, location: str, documents: str) -> None:
        with self._lock:
            record = self._require_access(ctx, location, "set legal documents")
            record.legal_documents = documents
            record.updated_at = _now()
        logger.info("Updated legal documents of %s", location, extra={"location": location})

    # --- Ownership, status, transactions ---

    def transfer_ownership(self, ctx: CallerContext, location: str, new_owner: Principal) -> None:
        """Hand the record to ``new_owner``, archiving the current owner.

        ``new_owner`` is not validated; the empty principal is accepted
        and leaves the record reachable only through the access list.
        """
        with self._lock:
            record = self._require_access(ctx, location, "transfer ownership")
            previous = record.owner
            record.ownership_history.append(previous)
            record.owner = new_owner
            record.updated_at = _now()
            self.events.ownership_transferred(location, previous, new_owner)
        logger.info(
            "Transferred %s from %s to %s",
            location,
            previous,
            new_owner,
            extra={"location": location, "principal": ctx.principal},
        )

    def change_property_status(
        self, ctx: CallerContext, location: str, status: PropertyStatus | str
    ) -> None:
        """Move the record to ``status``; any transition is allowed."""
        with self._lock:
            record = self._require_access(ctx, location, "change status")
            try:
                new_status = PropertyStatus(status)
            except ValueError as exc:
                raise InvalidArgumentError(f"Unknown property status {status!r}") from exc
            record.status = new_status
            record.updated_at = _now()
            self.events.status_changed(location, new_status)
        logger.info("Status of %s is now %s", location, new_status.value, extra={"location": location})

    def create_transaction_record(self, ctx: CallerContext, location: str, price: int) -> None:
        """Set the price once and announce a rent, mortgage or purchase.

        Fails with ``AlreadyPricedError`` whenever the stored price is
        non-zero, including the price given at registration.
        """
        with self._lock:
            record = self._require_access(ctx, location, "create transaction record")
            if record.price != 0:
                logger.warning(
                    "Rejected transaction record for %s: already priced at %d",
                    location,
                    record.price,
                    extra={"location": location, "kind": AlreadyPricedError.kind},
                )
                raise AlreadyPricedError(f"Property {location} already priced at {record.price}")
            _check_amount("price", price)
            kind = record.transaction_kind
            record.price = price
            record.updated_at = _now()
            self.events.transaction_created(location, kind, price)
        logger.info(
            "Transaction record for %s: %s at %d",
            location,
            kind.value,
            price,
            extra={"location": location},
        )

    # --- Queries ---

    def get_property_details(self, ctx: CallerContext, location: str) -> PropertySnapshot:
        """Return a snapshot of the record; owner or authorized callers only."""
        with self._lock:
            record = self._require_access(ctx, location, "read property details")
            logger.debug("Read details of %s", location, extra={"location": location})
            return record.snapshot()

    def has_property(self, location: str) -> bool:
        with self._lock:
            return location in self._records

    def locations(self) -> list[str]:
        """Registered locations in registration order."""
        with self._lock:
            return list(self._records)

    def summary(self) -> dict[str, int]:
        """Return summary counts of registry state."""
        with self._lock:
            counts = {status.value: 0 for status in PropertyStatus}
            for record in self._records.values():
                counts[record.status.value] += 1
            return {
                "properties": len(self._records),
                **counts,
                "inventory": len(self.inventory),
                "authorized_principals": len(self.acl.authorized_principals()),
                "events": len(self.events),
            }

    # --- Internals ---

    def _require_access(self, ctx: CallerContext, location: str, action: str) -> PropertyRecord:
        record = self._records.get(location)
        if record is None:
            logger.warning(
                "Rejected %s: %s not found",
                action,
                location,
                extra={"location": location, "kind": RecordNotFoundError.kind},
            )
            raise RecordNotFoundError(f"Property {location} not found")
        if not self.acl.can_access(ctx.principal, record.owner):
            logger.warning(
                "Rejected %s on %s: %s is neither owner nor authorized",
                action,
                location,
                ctx.principal,
                extra={"location": location, "principal": ctx.principal, "kind": UnauthorizedError.kind},
            )
            raise UnauthorizedError(f"{ctx.principal!r} may not {action} on {location}")
        return record


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_amount(name: str, value: object) -> None:
    if not _is_int(value) or value < 0:
        raise InvalidArgumentError(f"{name.capitalize()} must be a non-negative integer, got {value!r}")
