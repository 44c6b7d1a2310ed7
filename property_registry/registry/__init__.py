"""In-memory property registry with access control."""

from property_registry.registry.access import AccessControlList
from property_registry.registry.ancillary import (
    AncillaryStores,
    FinancingStore,
    RegulationsStore,
    VerificationStore,
)
from property_registry.registry.inventory import PropertyInventory
from property_registry.registry.registry import PropertyRegistry

__all__ = [
    "AccessControlList",
    "AncillaryStores",
    "FinancingStore",
    "PropertyInventory",
    "PropertyRegistry",
    "RegulationsStore",
    "VerificationStore",
]
