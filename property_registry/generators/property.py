"""Generators for sample listings and principals."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

from property_registry.generators.base import BaseGenerator
from property_registry.models.base import Principal


@dataclass
class PropertyListing:
    """Arguments for one ``register_property`` call."""

    location: str
    price: int
    description: str
    area: int  # Square meters
    is_used: bool
    legal_documents: str


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings with unique street-address locations."""

    DESCRIPTIONS = [
        "Detached house",
        "Townhouse",
        "Apartment",
        "Loft",
        "Duplex",
        "Cottage",
    ]

    def __init__(
        self,
        seed: int | None = None,
        unpriced_rate: float = 0.5,
        locale: str = "en_US",
    ) -> None:
        """Initialize property generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        unpriced_rate : float
            Share of listings registered with price 0, which leaves them
            open for a later transaction record.
        locale : str
            Faker locale for addresses.
        """
        super().__init__(seed, locale)
        self.unpriced_rate = unpriced_rate

    def generate(self) -> PropertyListing:
        """Generate a listing.

        Returns
        -------
        PropertyListing
            Generated listing.
        """
        area = random.randint(35, 400)
        if random.random() < self.unpriced_rate:
            price = 0
        else:
            price = random.randint(80, 2500) * 1000

        rooms = max(1, area // 35)
        return PropertyListing(
            location=f"{self.fake.unique.street_address()}, {self.fake.city()}",
            price=price,
            description=f"{random.choice(self.DESCRIPTIONS)}, {rooms} rooms. {self.fake.sentence()}",
            area=area,
            is_used=random.random() < 0.6,
            legal_documents=f"Deed {self.fake.bothify('??-######').upper()}",
        )

    def generate_batch(self, count: int) -> Iterator[PropertyListing]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.

        Yields
        ------
        PropertyListing
            Generated listings.
        """
        for _ in range(count):
            yield self.generate()


class PrincipalGenerator(BaseGenerator):
    """Generate unique principal handles such as ``agent-jdoe``."""

    def generate(self, prefix: str = "user") -> Principal:
        return f"{prefix}-{self.fake.unique.user_name()}"

    def generate_batch(self, count: int, prefix: str = "user") -> Iterator[Principal]:
        for _ in range(count):
            yield self.generate(prefix)
