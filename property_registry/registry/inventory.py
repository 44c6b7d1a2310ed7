"""Ordered inventory of location identifiers."""

from __future__ import annotations

import logging
import threading

from property_registry.models.base import CallerContext
from property_registry.registry.access import AccessControlList

logger = logging.getLogger(__name__)


class PropertyInventory:
    """Mutable list of locations kept alongside the registry.

    Membership is not tied to record existence: a location can be listed
    without a record and vice versa. Duplicates are allowed. Removal swaps
    the match with the last entry, so order is not preserved.
    """

    def __init__(self, acl: AccessControlList, lock: threading.RLock | None = None) -> None:
        self._acl = acl
        self._lock = lock or threading.RLock()
        self._locations: list[str] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._locations)

    def __contains__(self, location: object) -> bool:
        with self._lock:
            return location in self._locations

    def add(self, ctx: CallerContext, location: str) -> None:
        """Append ``location`` unconditionally."""
        with self._lock:
            self._acl.require_authorized(ctx, "add to inventory")
            self._locations.append(location)
        logger.info("Inventory add %s", location, extra={"location": location, "principal": ctx.principal})

    def remove(self, ctx: CallerContext, location: str) -> None:
        """Remove the first occurrence of ``location``; no-op if absent."""
        with self._lock:
            self._acl.require_authorized(ctx, "remove from inventory")
            try:
                idx = self._locations.index(location)
            except ValueError:
                logger.debug("Inventory remove %s: not listed", location)
                return
            self._locations[idx] = self._locations[-1]
            self._locations.pop()
        logger.info("Inventory remove %s", location, extra={"location": location, "principal": ctx.principal})

    def list(self) -> list[str]:
        """Return a copy of the listed locations."""
        with self._lock:
            return self._locations.copy()
