"""Tests for the demo inventory and shop construction."""

from sweetshop.config import DEFAULT_CONFIG
from sweetshop.sample_data import SAMPLE_SWEETS, build_shop, seed_sample_data
from sweetshop.shop import SweetShop


class TestSeedSampleData:
    """seed_sample_data() on an existing shop."""

    def test_seed_is_idempotent(self) -> None:
        """Test that a second seed adds nothing."""
        shop = SweetShop()
        assert seed_sample_data(shop) == 5
        assert seed_sample_data(shop) == 0
        assert shop.size() == 5

    def test_seed_skips_taken_ids(self) -> None:
        """Test that an existing sweet with a demo id is left in place."""
        shop = SweetShop()
        shop.create("House Special", "Nut-Based", 99.0, 1, sweet_id=1001)
        assert seed_sample_data(shop) == 4
        assert shop.get(1001).name == "House Special"


class TestBuildShop:
    """build_shop() from configuration."""

    def test_seeded(self) -> None:
        """Test that seed=True loads every demo sweet."""
        shop = build_shop(DEFAULT_CONFIG, seed=True)
        assert shop.size() == len(SAMPLE_SWEETS)

    def test_unseeded(self) -> None:
        """Test that seed=False gives an empty shop."""
        assert build_shop(DEFAULT_CONFIG, seed=False).size() == 0

    def test_start_id_from_config(self) -> None:
        """Test that inventory.start_id sets the first generated id."""
        config = {"inventory": {"start_id": 7000}}
        shop = build_shop(config, seed=False)
        assert shop.create("Peda", "Milk-Based", 5.0, 10).id == 7000

    def test_no_activity_log(self) -> None:
        """Test that the built shop does not log activity."""
        assert build_shop(DEFAULT_CONFIG, seed=True).activity is None
