"""Aggregate inventory statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

from sweetshop.models import Sweet


@dataclass(frozen=True)
class InventoryStats:
    """Totals computed over one snapshot of the inventory."""

    count: int = 0
    total_quantity: int = 0
    total_value: float = 0.0
    average_price: float = 0.0
    low_stock_count: int = 0
    category_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_stats(sweets: Iterable[Sweet]) -> InventoryStats:
    """
    Compute statistics for a collection of sweets

    Args:
        sweets: Sweets to aggregate (consumed once)

    Returns:
        InventoryStats; average_price is 0.0 for an empty collection
    """
    items = list(sweets)
    if not items:
        return InventoryStats()

    return InventoryStats(
        count=len(items),
        total_quantity=sum(s.quantity for s in items),
        total_value=sum(s.value for s in items),
        average_price=sum(s.price for s in items) / len(items),
        low_stock_count=sum(1 for s in items if s.is_low_stock),
        category_count=len({s.category for s in items if s.category is not None}),
    )
