"""Demo inventory loaded when the shop starts."""

from __future__ import annotations

from typing import Any

from sweetshop.config import get_setting
from sweetshop.models import Sweet
from sweetshop.shop import SweetShop
from sweetshop.store import DEFAULT_START_ID, SweetStore

# (id, name, category, price, quantity)
SAMPLE_SWEETS = [
    (1001, "Kaju Katli", "Nut-Based", 50.0, 20),
    (1002, "Gajar Halwa", "Vegetable-Based", 30.0, 15),
    (1003, "Gulab Jamun", "Milk-Based", 10.0, 50),
    (1004, "Rasgulla", "Milk-Based", 12.0, 40),
    (1005, "Jalebi", "Syrup-Based", 8.0, 60),
]


def seed_sample_data(shop: SweetShop) -> int:
    """
    Add the demo sweets to a shop

    Sweets whose id is already present are skipped.

    Returns:
        Number of sweets added
    """
    added = 0
    for sweet_id, name, category, price, quantity in SAMPLE_SWEETS:
        if shop.get(sweet_id) is not None:
            continue
        shop.add(Sweet(sweet_id, name, category, price, quantity))
        added += 1
    return added


def build_shop(config: dict[str, Any], seed: bool) -> SweetShop:
    """Build a shop from configuration, without activity logging.

    Args:
        config: Merged configuration
        seed: Load the demo sweets
    """
    start_id = get_setting(config, "inventory.start_id", DEFAULT_START_ID)
    shop = SweetShop(store=SweetStore(start_id=start_id))
    if seed:
        seed_sample_data(shop)
    return shop
