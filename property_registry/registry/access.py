"""Access-control list gating every registry mutation."""

from __future__ import annotations

import logging
import threading

from property_registry.exceptions import AdminOnlyError, UnauthorizedError
from property_registry.models.base import CallerContext, Principal

logger = logging.getLogger(__name__)


class AccessControlList:
    """Mapping from principal to an "authorized" flag.

    Only the administrative principal may change entries. The admin is
    not implicitly authorized for registry operations; it has to grant
    itself an entry like anyone else.

    Parameters
    ----------
    admin : Principal
        Principal allowed to authorize and revoke.
    lock : threading.RLock | None
        Lock shared with the owning registry. A private one is created
        when the list is used on its own.
    """

    def __init__(self, admin: Principal, lock: threading.RLock | None = None) -> None:
        self._admin = admin
        self._lock = lock or threading.RLock()
        self._entries: dict[Principal, bool] = {}

    @property
    def admin(self) -> Principal:
        return self._admin

    def authorize(self, ctx: CallerContext, principal: Principal) -> None:
        """Grant registry-level authorization to ``principal``. Idempotent."""
        with self._lock:
            self._require_admin(ctx, "authorize")
            self._entries[principal] = True
        logger.info("Authorized %s", principal, extra={"principal": ctx.principal})

    def revoke(self, ctx: CallerContext, principal: Principal) -> None:
        """Withdraw authorization from ``principal``. Idempotent."""
        with self._lock:
            self._require_admin(ctx, "revoke")
            self._entries.pop(principal, None)
        logger.info("Revoked %s", principal, extra={"principal": ctx.principal})

    def is_authorized(self, principal: Principal) -> bool:
        """Return True if ``principal`` holds an authorized entry."""
        with self._lock:
            return self._entries.get(principal, False)

    def authorized_principals(self) -> list[Principal]:
        """Return all authorized principals in the order they were granted."""
        with self._lock:
            return [p for p, allowed in self._entries.items() if allowed]

    def can_access(self, principal: Principal, owner: Principal) -> bool:
        """Record-level check: the record owner or any authorized principal."""
        return principal == owner or self.is_authorized(principal)

    def require_authorized(self, ctx: CallerContext, action: str) -> None:
        """Raise ``UnauthorizedError`` unless the caller holds an entry."""
        if not self.is_authorized(ctx.principal):
            logger.warning(
                "Rejected %s: %s is not authorized",
                action,
                ctx.principal,
                extra={"principal": ctx.principal, "kind": UnauthorizedError.kind},
            )
            raise UnauthorizedError(f"{ctx.principal!r} is not authorized to {action}")

    def _require_admin(self, ctx: CallerContext, action: str) -> None:
        if ctx.principal != self._admin:
            logger.warning(
                "Rejected %s: %s is not the registry admin",
                action,
                ctx.principal,
                extra={"principal": ctx.principal, "kind": AdminOnlyError.kind},
            )
            raise AdminOnlyError(f"Only the registry admin may {action} principals")
