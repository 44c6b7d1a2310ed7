"""Property registry: ownership, status and metadata behind an access list."""

from property_registry.models import CallerContext, PropertyStatus
from property_registry.registry import PropertyRegistry

__all__ = ["CallerContext", "PropertyRegistry", "PropertyStatus"]

__version__ = "0.1.0"
