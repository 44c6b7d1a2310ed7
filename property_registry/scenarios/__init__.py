"""Scenarios for generating populated sample registries."""

from property_registry.scenarios.portfolio import PortfolioScenario

__all__ = ["PortfolioScenario"]
