"""
Sweet record

One inventory line: id, name, category, price and quantity.
Field invariants are checked on construction and on every update.
"""

from __future__ import annotations

from typing import Any

from sweetshop.errors import InsufficientStockError, ValidationError

# Items with quantity strictly below this are "low stock"
LOW_STOCK_THRESHOLD = 10


def validate_name(name: str | None) -> str:
    """
    Check that a name is non-empty after trimming

    Returns:
        The name unchanged
    """
    if name is None or not name.strip():
        raise ValidationError("Name cannot be null or empty")
    return name


def validate_price(price: float) -> float:
    """Check that a price is not negative."""
    if price < 0:
        raise ValidationError("Price cannot be negative")
    return float(price)


def is_whole_number(value: object) -> bool:
    """True for ints and integral floats; bools are rejected."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def validate_quantity(quantity: int) -> int:
    """Check that a quantity is a whole number and not negative."""
    if not is_whole_number(quantity):
        raise ValidationError(f"Quantity must be a whole number, got {quantity!r}")
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return int(quantity)


class Sweet:
    """
    A sweet in the shop inventory

    Two sweets are equal when their ids match; the other fields are
    irrelevant to identity.
    """

    __slots__ = ("_id", "_name", "_category", "_price", "_quantity")

    def __init__(
        self,
        sweet_id: int,
        name: str,
        category: str,
        price: float,
        quantity: int,
    ) -> None:
        """
        Args:
            sweet_id: Unique identifier, fixed for the lifetime of the sweet
            name: Display name (must not be blank)
            category: Free-text category, e.g. "Nut-Based"
            price: Unit price in currency units (>= 0)
            quantity: Units in stock (>= 0)

        Raises:
            ValidationError: If any field breaks its invariant
        """
        self._name = validate_name(name)
        self._price = validate_price(price)
        self._quantity = validate_quantity(quantity)
        self._id = sweet_id
        self._category = category

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_name(value)

    @property
    def category(self) -> str:
        return self._category

    @category.setter
    def category(self, value: str) -> None:
        self._category = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self._price = validate_price(value)

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        self._quantity = validate_quantity(value)

    @property
    def value(self) -> float:
        """Stock value of this line (price x quantity)."""
        return self._price * self._quantity

    @property
    def is_low_stock(self) -> bool:
        return self._quantity < LOW_STOCK_THRESHOLD

    def decrease_quantity(self, amount: int) -> None:
        """
        Take units out of stock

        Args:
            amount: Units to remove

        Raises:
            ValidationError: If amount is not a whole number
            InsufficientStockError: If amount exceeds the current quantity
                (quantity is left untouched)
        """
        if not is_whole_number(amount):
            raise ValidationError("Amount must be a whole number")
        if amount > self._quantity:
            raise InsufficientStockError(available=self._quantity, requested=amount)
        self._quantity -= int(amount)

    def increase_quantity(self, amount: int) -> None:
        """
        Put units into stock (no upper bound)

        Raises:
            ValidationError: If amount is negative or not a whole number
        """
        if not is_whole_number(amount):
            raise ValidationError("Amount must be a whole number")
        if amount < 0:
            raise ValidationError("Amount cannot be negative")
        self._quantity += int(amount)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "id": self._id,
            "name": self._name,
            "category": self._category,
            "price": self._price,
            "quantity": self._quantity,
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Sweet):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Sweet[id={self._id}, name='{self._name}', category='{self._category}', "
            f"price={self._price:.2f}, quantity={self._quantity}]"
        )
