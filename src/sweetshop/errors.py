"""
Inventory errors

Every failure is raised synchronously to the immediate caller and leaves
the inventory exactly as it was before the call.
"""

from __future__ import annotations


class SweetShopError(Exception):
    """Base class for all inventory errors."""


class ValidationError(SweetShopError, ValueError):
    """A field value breaks a Sweet invariant (empty name, negative price or quantity)."""


class InvalidArgumentError(SweetShopError, ValueError):
    """An operation argument is malformed (non-positive amount, bad price range, missing sweet)."""


class DuplicateIdError(SweetShopError):
    """Raised when inserting a sweet whose id is already stored."""

    def __init__(self, sweet_id: int) -> None:
        """
        Args:
            sweet_id: The colliding id
        """
        self.sweet_id = sweet_id
        super().__init__(f"Sweet with ID {sweet_id} already exists")


class NotFoundError(SweetShopError, LookupError):
    """Raised when an operation targets an id that is not stored."""

    def __init__(self, sweet_id: int) -> None:
        """
        Args:
            sweet_id: The unknown id
        """
        self.sweet_id = sweet_id
        super().__init__(f"Sweet with ID {sweet_id} not found")


class InsufficientStockError(SweetShopError):
    """Raised when a purchase asks for more than is in stock."""

    def __init__(self, available: int, requested: int) -> None:
        """
        Args:
            available: Quantity currently in stock
            requested: Quantity asked for
        """
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}"
        )
