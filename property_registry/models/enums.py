"""Enumeration types for property records and events."""

from enum import Enum


class PropertyStatus(str, Enum):
    FOR_SALE = "ForSale"
    MORTGAGED = "Mortgaged"
    RENTED = "Rented"


class TransactionKind(str, Enum):
    RENTED = "Rented"
    MORTGAGED = "Mortgaged"
    PURCHASED = "Purchased"


class EventType(str, Enum):
    OWNERSHIP_TRANSFERRED = "property.ownership_transferred"
    STATUS_CHANGED = "property.status_changed"
    TRANSACTION_CREATED = "property.transaction_created"
