"""Pytest configuration and fixtures."""

import pytest

from property_registry.models.base import CallerContext
from property_registry.registry import PropertyRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def admin() -> CallerContext:
    """Registry administrator."""
    return CallerContext("admin")


@pytest.fixture
def agent() -> CallerContext:
    """Principal present in the access list."""
    return CallerContext("agent-001")


@pytest.fixture
def outsider() -> CallerContext:
    """Principal with no access entry and no property."""
    return CallerContext("mallory")


@pytest.fixture
def registry(admin: CallerContext, agent: CallerContext) -> PropertyRegistry:
    """Fresh registry with the agent authorized."""
    reg = PropertyRegistry(admin.principal)
    reg.acl.authorize(admin, agent.principal)
    return reg


@pytest.fixture
def location() -> str:
    """Sample location identifier."""
    return "123 Elm St"


@pytest.fixture
def registered(registry: PropertyRegistry, agent: CallerContext, location: str) -> str:
    """Register ``location`` as the agent with price 0 and return it."""
    registry.register_property(agent, location, 0, "Two-bedroom house", 120, False, "Deed EL-000123")
    return location
