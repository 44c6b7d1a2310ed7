"""Sample data generators for populating registries."""

from property_registry.generators.property import (
    PrincipalGenerator,
    PropertyGenerator,
    PropertyListing,
)

__all__ = ["PrincipalGenerator", "PropertyGenerator", "PropertyListing"]
