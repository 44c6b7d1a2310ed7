"""Domain models for the property registry."""

from property_registry.models.base import CallerContext, Event, Principal
from property_registry.models.enums import EventType, PropertyStatus, TransactionKind
from property_registry.models.property import PropertyRecord, PropertySnapshot

__all__ = [
    "CallerContext",
    "Event",
    "EventType",
    "Principal",
    "PropertyRecord",
    "PropertySnapshot",
    "PropertyStatus",
    "TransactionKind",
]
