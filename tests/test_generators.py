"""Tests for sample data generators."""

from property_registry.generators import PrincipalGenerator, PropertyGenerator, PropertyListing


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    def test_generate_listing(self, seed: int) -> None:
        listing = PropertyGenerator(seed=seed).generate()

        assert isinstance(listing, PropertyListing)
        assert listing.location
        assert 35 <= listing.area <= 400
        assert listing.price == 0 or 80_000 <= listing.price <= 2_500_000
        assert isinstance(listing.is_used, bool)
        assert listing.legal_documents.startswith("Deed ")

    def test_locations_unique(self, seed: int) -> None:
        listings = list(PropertyGenerator(seed=seed).generate_batch(50))

        assert len(listings) == 50
        assert len({l.location for l in listings}) == 50

    def test_reproducible(self, seed: int) -> None:
        first = PropertyGenerator(seed=seed).generate()
        second = PropertyGenerator(seed=seed).generate()

        assert first == second

    def test_unpriced_rate_extremes(self, seed: int) -> None:
        unpriced = list(PropertyGenerator(seed=seed, unpriced_rate=1.0).generate_batch(10))
        priced = list(PropertyGenerator(seed=seed, unpriced_rate=0.0).generate_batch(10))

        assert all(l.price == 0 for l in unpriced)
        assert all(l.price > 0 for l in priced)


class TestPrincipalGenerator:
    """Tests for PrincipalGenerator."""

    def test_prefix(self, seed: int) -> None:
        principal = PrincipalGenerator(seed=seed).generate("agent")

        assert principal.startswith("agent-")

    def test_batch_unique(self, seed: int) -> None:
        principals = list(PrincipalGenerator(seed=seed).generate_batch(30, "owner"))

        assert len(set(principals)) == 30
