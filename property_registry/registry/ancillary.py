"""Side-tables for financing, regulations and verification providers.

These stores share the registry's access-control list but have no
relationship with property records: a location may carry financing
details without ever having been registered.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from property_registry.models.base import CallerContext, Principal
from property_registry.registry.access import AccessControlList

logger = logging.getLogger(__name__)


class _GatedStore:
    """Common write/read gate for ancillary stores."""

    name = "ancillary"

    def __init__(
        self,
        acl: AccessControlList,
        lock: threading.RLock | None = None,
        gate_reads: bool = True,
    ) -> None:
        self._acl = acl
        self._lock = lock or threading.RLock()
        self.gate_reads = gate_reads

    def _check_write(self, ctx: CallerContext) -> None:
        self._acl.require_authorized(ctx, f"set {self.name}")

    def _check_read(self, ctx: CallerContext) -> None:
        if self.gate_reads:
            self._acl.require_authorized(ctx, f"read {self.name}")


class FinancingStore(_GatedStore):
    """Free-form financing details per location."""

    name = "financing details"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._details: dict[str, str] = {}

    def set(self, ctx: CallerContext, location: str, details: str) -> None:
        with self._lock:
            self._check_write(ctx)
            self._details[location] = details
        logger.info("Set financing details for %s", location, extra={"location": location})

    def get(self, ctx: CallerContext, location: str) -> str:
        with self._lock:
            self._check_read(ctx)
            return self._details.get(location, "")


class RegulationsStore(_GatedStore):
    """A single registry-wide local regulations text."""

    name = "local regulations"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._text = ""

    def set(self, ctx: CallerContext, text: str) -> None:
        with self._lock:
            self._check_write(ctx)
            self._text = text
        logger.info("Set local regulations (%d chars)", len(text))

    def get(self, ctx: CallerContext) -> str:
        with self._lock:
            self._check_read(ctx)
            return self._text


class VerificationStore(_GatedStore):
    """Ordered verification providers per location."""

    name = "verification providers"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._providers: dict[str, list[Principal]] = {}

    def set(self, ctx: CallerContext, location: str, providers: Iterable[Principal]) -> None:
        """Replace the provider list for ``location``."""
        providers = list(providers)
        with self._lock:
            self._check_write(ctx)
            self._providers[location] = providers
        logger.info(
            "Set %d verification providers for %s",
            len(providers),
            location,
            extra={"location": location},
        )

    def get(self, ctx: CallerContext, location: str) -> list[Principal]:
        with self._lock:
            self._check_read(ctx)
            return list(self._providers.get(location, []))


class AncillaryStores:
    """The three ancillary side-tables behind one access gate."""

    def __init__(
        self,
        acl: AccessControlList,
        lock: threading.RLock | None = None,
        gate_reads: bool = True,
    ) -> None:
        lock = lock or threading.RLock()
        self.financing = FinancingStore(acl, lock, gate_reads)
        self.regulations = RegulationsStore(acl, lock, gate_reads)
        self.verification = VerificationStore(acl, lock, gate_reads)
