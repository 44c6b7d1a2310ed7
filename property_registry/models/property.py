"""Property record model."""

from dataclasses import dataclass, field
from datetime import datetime

from property_registry.models.base import Principal
from property_registry.models.enums import PropertyStatus, TransactionKind


@dataclass
class PropertyRecord:
    """Mutable state tracked for one property, keyed by location."""

    location: str
    owner: Principal
    price: int  # Sale price or monthly rent, depending on status
    description: str
    area: int  # Square meters
    legal_documents: str
    status: PropertyStatus = PropertyStatus.FOR_SALE
    ownership_history: list[Principal] = field(default_factory=list)  # Append-only
    is_inspected: bool = False
    is_viewed: bool = False
    is_used: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def transaction_kind(self) -> TransactionKind:
        """Kind of transaction a price on this record represents."""
        if self.status == PropertyStatus.RENTED:
            return TransactionKind.RENTED
        if self.status == PropertyStatus.MORTGAGED:
            return TransactionKind.MORTGAGED
        return TransactionKind.PURCHASED

    def snapshot(self) -> "PropertySnapshot":
        """Return an immutable copy detached from this record."""
        return PropertySnapshot(
            location=self.location,
            owner=self.owner,
            price=self.price,
            description=self.description,
            area=self.area,
            legal_documents=self.legal_documents,
            status=self.status,
            ownership_history=tuple(self.ownership_history),
            is_inspected=self.is_inspected,
            is_viewed=self.is_viewed,
            is_used=self.is_used,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(frozen=True)
class PropertySnapshot:
    """Read-only view of a property record at a point in time."""

    location: str
    owner: Principal
    price: int
    description: str
    area: int
    legal_documents: str
    status: PropertyStatus
    ownership_history: tuple[Principal, ...]
    is_inspected: bool
    is_viewed: bool
    is_used: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
