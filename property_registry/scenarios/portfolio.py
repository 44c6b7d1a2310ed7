"""Portfolio scenario: a populated registry with ownership and status churn."""

from __future__ import annotations

import logging
import random
from typing import Any

from property_registry.config import RegistryConfig
from property_registry.exceptions import ConfigurationError
from property_registry.generators import PrincipalGenerator, PropertyGenerator
from property_registry.models.base import CallerContext
from property_registry.models.enums import PropertyStatus
from property_registry.models.property import PropertySnapshot
from property_registry.registry import PropertyRegistry

logger = logging.getLogger(__name__)

REGULATIONS_TEXT = (
    "Short-term rentals under 30 days require a municipal permit. "
    "Mortgaged properties must keep insurance on file with the lender."
)


class PortfolioScenario:
    """Generate a registry with a realistic mix of owners and statuses.

    This scenario creates:
    - An admin and a pool of authorized agents
    - Properties registered by agents and listed in the inventory
    - Ownership transfers from agents to private owners
    - Rentals and mortgages, with transaction records for unpriced listings
    - Financing details, verification providers and local regulations
    """

    def __init__(
        self,
        num_properties: int = 100,
        num_agents: int = 5,
        num_owners: int = 50,
        transfer_rate: float = 0.6,
        rental_rate: float = 0.25,
        mortgage_rate: float = 0.20,
        seed: int | None = None,
        *,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize portfolio scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to register.
        num_agents : int
            Number of authorized agents registering properties.
        num_owners : int
            Number of private owners properties are transferred to.
        transfer_rate : float
            Share of properties transferred to a private owner.
        rental_rate : float
            Share of properties moved to Rented.
        mortgage_rate : float
            Share of properties moved to Mortgaged.
        seed : int | None
            Random seed for reproducibility. Falls back to ``config.seed``.
        config : RegistryConfig | None
            Registry configuration; defaults are used when omitted.
        """
        if num_agents < 1:
            raise ConfigurationError("Portfolio scenario needs at least one agent")

        self.config = config or RegistryConfig()
        self.seed = seed if seed is not None else self.config.seed
        self.num_properties = num_properties
        self.num_agents = num_agents
        self.num_owners = num_owners
        self.transfer_rate = transfer_rate
        self.rental_rate = rental_rate
        self.mortgage_rate = mortgage_rate

        if self.seed is not None:
            random.seed(self.seed)

        self.registry = PropertyRegistry.from_config(self.config)
        self.admin = CallerContext(self.config.admin)
        self._property_gen = PropertyGenerator(seed=self.seed)
        self._principal_gen = PrincipalGenerator(seed=self.seed)

    def generate(self) -> PropertyRegistry:
        """Populate the registry.

        Returns
        -------
        PropertyRegistry
            Registry containing all generated data.
        """
        logger.info(
            "Starting portfolio scenario: %d properties, %d agents",
            self.num_properties,
            self.num_agents,
        )
        registry = self.registry

        registry.acl.authorize(self.admin, self.admin.principal)
        agents = [CallerContext(p) for p in self._principal_gen.generate_batch(self.num_agents, "agent")]
        for agent in agents:
            registry.acl.authorize(self.admin, agent.principal)
        owners = list(self._principal_gen.generate_batch(self.num_owners, "owner"))

        for listing in self._property_gen.generate_batch(self.num_properties):
            agent = random.choice(agents)
            registry.register_property(
                agent,
                listing.location,
                listing.price,
                listing.description,
                listing.area,
                listing.is_used,
                listing.legal_documents,
            )
            registry.inventory.add(agent, listing.location)
            self._simulate_lifecycle(agent, listing.location, listing.price, owners)

        registry.ancillary.regulations.set(self.admin, REGULATIONS_TEXT)

        logger.info("Portfolio scenario complete: %s", registry.summary())
        return registry

    def _simulate_lifecycle(
        self,
        agent: CallerContext,
        location: str,
        price: int,
        owners: list[str],
    ) -> None:
        registry = self.registry

        if random.random() < 0.7:
            registry.set_viewed(agent, location, True)
        if random.random() < 0.5:
            registry.set_inspected(agent, location, True)

        authorized = registry.acl.authorized_principals()
        providers = random.sample(authorized, k=min(2, len(authorized)))
        registry.ancillary.verification.set(agent, location, providers)

        actor = agent
        if owners and random.random() < self.transfer_rate:
            new_owner = random.choice(owners)
            registry.transfer_ownership(agent, location, new_owner)
            actor = CallerContext(new_owner)

        roll = random.random()
        if roll < self.rental_rate:
            registry.change_property_status(actor, location, PropertyStatus.RENTED)
            monthly_rent = random.randint(8, 60) * 100
            if price == 0:
                registry.create_transaction_record(actor, location, monthly_rent)
        elif roll < self.rental_rate + self.mortgage_rate:
            registry.change_property_status(actor, location, PropertyStatus.MORTGAGED)
            principal = random.randint(100, 1500) * 1000
            if price == 0:
                registry.create_transaction_record(actor, location, principal)
            registry.ancillary.financing.set(
                agent,
                location,
                f"Mortgage of {principal} at {random.uniform(3.0, 7.5):.2f}% over {random.choice([15, 20, 30])} years",
            )
        elif price == 0 and random.random() < 0.3:
            registry.create_transaction_record(actor, location, random.randint(80, 2500) * 1000)

    def snapshots(self) -> list[PropertySnapshot]:
        """Snapshots of every registered property, read as the admin."""
        return [
            self.registry.get_property_details(self.admin, location)
            for location in self.registry.locations()
        ]

    def export(self, sinks: list[Any]) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            List of sink instances (ConsoleSink, JsonFileSink, KafkaSink).
        """
        snapshots = self.snapshots()
        events = self.registry.events.events
        for sink in sinks:
            sink.write_batch("properties", snapshots)
            sink.write_batch("events", events)
