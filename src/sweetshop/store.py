"""
In-memory sweet store

Holds the authoritative id -> Sweet mapping and the id generator.
"""

from __future__ import annotations

from typing import Iterator

from sweetshop.errors import DuplicateIdError, InvalidArgumentError
from sweetshop.models import Sweet

# First id handed out by the generator
DEFAULT_START_ID = 1001


class SweetStore:
    """
    Keyed collection of sweets

    The next-id counter belongs to the instance, so separate stores never
    share ids. Generated ids are never reused, even after a delete or clear.
    """

    def __init__(self, start_id: int = DEFAULT_START_ID) -> None:
        """
        Args:
            start_id: First id the generator hands out
        """
        self._items: dict[int, Sweet] = {}
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        """The id the generator will try next."""
        return self._next_id

    def insert(self, sweet: Sweet | None) -> None:
        """
        Add a sweet under its own id

        Raises:
            InvalidArgumentError: If sweet is None
            DuplicateIdError: If the id is already stored
        """
        if sweet is None:
            raise InvalidArgumentError("Sweet cannot be null")
        if sweet.id in self._items:
            raise DuplicateIdError(sweet.id)
        self._items[sweet.id] = sweet

    def insert_with_generated_id(
        self, name: str, category: str, price: float, quantity: int
    ) -> Sweet:
        """
        Build a sweet with the next free id and store it

        The counter only advances once the sweet has been built, so a
        failed validation does not burn an id.

        Returns:
            The created sweet

        Raises:
            ValidationError: If any field breaks its invariant
        """
        sweet_id = self._next_id
        # explicit inserts may already occupy generator ids
        while sweet_id in self._items:
            sweet_id += 1

        sweet = Sweet(sweet_id, name, category, price, quantity)
        self._items[sweet_id] = sweet
        self._next_id = sweet_id + 1
        return sweet

    def remove(self, sweet_id: int) -> bool:
        """
        Remove a sweet

        Returns:
            True if a sweet was removed, False if none had that id
        """
        return self._items.pop(sweet_id, None) is not None

    def get(self, sweet_id: int) -> Sweet | None:
        """Return the sweet for sweet_id, or None if absent."""
        return self._items.get(sweet_id)

    def all(self) -> list[Sweet]:
        """Return a snapshot list of every stored sweet (insertion order)."""
        return list(self._items.values())

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every sweet. The id counter keeps its position."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, sweet_id: object) -> bool:
        return sweet_id in self._items

    def __iter__(self) -> Iterator[Sweet]:
        return iter(self.all())
