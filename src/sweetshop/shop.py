"""
Sweet shop operations

Queries and mutations over a SweetStore. Queries are pure functions of the
store's current snapshot. Mutations validate fully before touching a sweet,
so a failed call never leaves a partial change behind.
"""

from __future__ import annotations

from typing import Any, Callable

from sweetshop.errors import InsufficientStockError, InvalidArgumentError, NotFoundError
from sweetshop.logger import ActivityLog
from sweetshop.models import (
    Sweet,
    is_whole_number,
    validate_name,
    validate_price,
    validate_quantity,
)
from sweetshop.stats import InventoryStats, compute_stats
from sweetshop.store import SweetStore

SORT_KEYS: dict[str, Callable[[Sweet], Any]] = {
    "name": lambda s: s.name,
    "price": lambda s: s.price,
    "quantity": lambda s: s.quantity,
    "category": lambda s: s.category or "",
}

# field -> validator applied before an update is written
_FIELD_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "name": validate_name,
    "category": lambda value: value,
    "price": validate_price,
    "quantity": validate_quantity,
}


def _is_blank(term: str | None) -> bool:
    return term is None or not term.strip()


def _check_price_bounds(min_price: float | None, max_price: float | None) -> None:
    if (min_price is not None and min_price < 0) or (
        max_price is not None and max_price < 0
    ):
        raise InvalidArgumentError("Invalid price range")
    if min_price is not None and max_price is not None and min_price > max_price:
        raise InvalidArgumentError("Invalid price range")


def _check_amount(amount: int, operation: str) -> int:
    if not is_whole_number(amount):
        raise InvalidArgumentError(f"{operation} quantity must be a whole number")
    if amount <= 0:
        raise InvalidArgumentError(f"{operation} quantity must be positive")
    return int(amount)


class SweetShop:
    """
    Inventory operations for the shop

    Wraps a SweetStore; every call is synchronous and runs to completion or
    raises before mutating anything.
    """

    def __init__(
        self,
        store: SweetStore | None = None,
        activity: ActivityLog | None = None,
    ) -> None:
        """
        Args:
            store: Backing store (default: a fresh SweetStore)
            activity: Optional activity log receiving mutation events
        """
        self.store = store if store is not None else SweetStore()
        self.activity = activity

    # ---- CRUD ----

    def add(self, sweet: Sweet) -> Sweet:
        """
        Insert a sweet that already carries its id

        Raises:
            InvalidArgumentError: If sweet is None
            DuplicateIdError: If the id is taken
        """
        self.store.insert(sweet)
        self._record_added(sweet)
        return sweet

    def create(
        self,
        name: str,
        category: str,
        price: float,
        quantity: int,
        sweet_id: int | None = None,
    ) -> Sweet:
        """
        Create and store a sweet

        Args:
            name: Sweet name
            category: Category label
            price: Unit price
            quantity: Units in stock
            sweet_id: Explicit id; the store's generator is used when None

        Returns:
            The stored sweet

        Raises:
            ValidationError: If a field is invalid (nothing is stored)
            DuplicateIdError: If an explicit id is taken
        """
        if sweet_id is None:
            sweet = self.store.insert_with_generated_id(name, category, price, quantity)
        else:
            sweet = Sweet(sweet_id, name, category, price, quantity)
            self.store.insert(sweet)
        self._record_added(sweet)
        return sweet

    def delete(self, sweet_id: int) -> bool:
        """Delete a sweet. Returns False if no sweet had that id."""
        removed = self.store.remove(sweet_id)
        if removed and self.activity:
            self.activity.log_sweet_deleted(sweet_id)
        return removed

    def get(self, sweet_id: int) -> Sweet | None:
        return self.store.get(sweet_id)

    def list(self) -> list[Sweet]:
        return self.store.all()

    def size(self) -> int:
        return self.store.size()

    def clear(self) -> None:
        self.store.clear()

    # ---- Queries ----

    def search_by_name(self, term: str | None) -> list[Sweet]:
        """Case-insensitive substring match on name; a blank term returns everything."""
        if _is_blank(term):
            return self.list()
        needle = term.lower()
        return [s for s in self.store.all() if needle in s.name.lower()]

    def search_by_category(self, term: str | None) -> list[Sweet]:
        """Case-insensitive exact match on category; a blank term returns everything."""
        if _is_blank(term):
            return self.list()
        wanted = term.casefold()
        return [
            s for s in self.store.all()
            if s.category is not None and s.category.casefold() == wanted
        ]

    def search_by_price_range(self, min_price: float, max_price: float) -> list[Sweet]:
        """
        Sweets with min_price <= price <= max_price

        Raises:
            InvalidArgumentError: If a bound is negative or min_price > max_price
        """
        _check_price_bounds(min_price, max_price)
        return [s for s in self.store.all() if min_price <= s.price <= max_price]

    def filter(
        self,
        name: str | None = None,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> list[Sweet]:
        """
        Combined filter, every given criterion must match

        Name and category follow search_by_name / search_by_category rules.
        A missing price bound is open on that side.
        """
        _check_price_bounds(min_price, max_price)

        results = self.search_by_name(name)
        if not _is_blank(category):
            wanted = category.casefold()
            results = [
                s for s in results
                if s.category is not None and s.category.casefold() == wanted
            ]
        if min_price is not None:
            results = [s for s in results if s.price >= min_price]
        if max_price is not None:
            results = [s for s in results if s.price <= max_price]
        return results

    def sorted_by_name(self) -> list[Sweet]:
        return self.sorted_by("name")

    def sorted_by_price(self) -> list[Sweet]:
        return self.sorted_by("price")

    def sorted_by(self, key: str, descending: bool = False) -> list[Sweet]:
        """
        Stable sort of the snapshot

        Args:
            key: One of name, price, quantity, category
            descending: Reverse the order (ties still keep snapshot order)

        Raises:
            InvalidArgumentError: If key is unknown
        """
        if key not in SORT_KEYS:
            raise InvalidArgumentError(
                f"Invalid sort key: {key}. Must be one of {sorted(SORT_KEYS)}"
            )
        return sorted(self.store.all(), key=SORT_KEYS[key], reverse=descending)

    def categories(self) -> list[str]:
        """Distinct categories, sorted."""
        return sorted({s.category for s in self.store.all() if s.category is not None})

    def low_stock(self) -> list[Sweet]:
        return [s for s in self.store.all() if s.is_low_stock]

    def statistics(self) -> InventoryStats:
        return compute_stats(self.store.all())

    # ---- Stock mutations ----

    def purchase(self, sweet_id: int, amount: int) -> Sweet:
        """
        Sell units of a sweet

        Returns:
            The updated sweet

        Raises:
            NotFoundError: If no sweet has sweet_id
            InvalidArgumentError: If amount is not a positive whole number
            InsufficientStockError: If amount exceeds stock (nothing is sold)
        """
        try:
            sweet = self._require(sweet_id)
            amount = _check_amount(amount, "Purchase")
            sweet.decrease_quantity(amount)
        except (NotFoundError, InvalidArgumentError, InsufficientStockError) as e:
            self._record_failure("purchase", sweet_id, e)
            raise

        if self.activity:
            self.activity.log_stock_change(
                ActivityLog.PURCHASE, sweet_id, amount, sweet.quantity
            )
        return sweet

    def restock(self, sweet_id: int, amount: int) -> Sweet:
        """
        Add units of a sweet (no upper bound)

        Returns:
            The updated sweet

        Raises:
            NotFoundError: If no sweet has sweet_id
            InvalidArgumentError: If amount is not a positive whole number
        """
        try:
            sweet = self._require(sweet_id)
            amount = _check_amount(amount, "Restock")
            sweet.increase_quantity(amount)
        except (NotFoundError, InvalidArgumentError) as e:
            self._record_failure("restock", sweet_id, e)
            raise

        if self.activity:
            self.activity.log_stock_change(
                ActivityLog.RESTOCK, sweet_id, amount, sweet.quantity
            )
        return sweet

    # ---- Field updates ----

    def rename(self, sweet_id: int, name: str) -> Sweet:
        return self.update(sweet_id, name=name)

    def recategorize(self, sweet_id: int, category: str) -> Sweet:
        return self.update(sweet_id, category=category)

    def reprice(self, sweet_id: int, price: float) -> Sweet:
        return self.update(sweet_id, price=price)

    def set_quantity(self, sweet_id: int, quantity: int) -> Sweet:
        return self.update(sweet_id, quantity=quantity)

    def update(self, sweet_id: int, **fields: Any) -> Sweet:
        """
        Update several fields at once, all or nothing

        Args:
            sweet_id: Sweet to update
            **fields: Any of name, category, price, quantity

        Returns:
            The updated sweet

        Raises:
            NotFoundError: If no sweet has sweet_id
            InvalidArgumentError: If a field name is unknown
            ValidationError: If a value breaks its invariant (nothing is written)
        """
        sweet = self._require(sweet_id)

        unknown = set(fields) - set(_FIELD_VALIDATORS)
        if unknown:
            raise InvalidArgumentError(f"Unknown sweet field(s): {', '.join(sorted(unknown))}")

        checked = {
            field: _FIELD_VALIDATORS[field](value) for field, value in fields.items()
        }
        for field, value in checked.items():
            setattr(sweet, field, value)

        if checked and self.activity:
            self.activity.log_sweet_updated(sweet_id, checked)
        return sweet

    # ---- Internal ----

    def _require(self, sweet_id: int) -> Sweet:
        sweet = self.store.get(sweet_id)
        if sweet is None:
            raise NotFoundError(sweet_id)
        return sweet

    def _record_added(self, sweet: Sweet) -> None:
        if self.activity:
            self.activity.log_sweet_added(sweet.to_dict())

    def _record_failure(self, operation: str, sweet_id: int, error: Exception) -> None:
        if self.activity:
            self.activity.log_failure(operation, sweet_id, str(error))
