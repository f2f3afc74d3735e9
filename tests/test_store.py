"""Tests for SweetStore."""

import pytest

from sweetshop.errors import DuplicateIdError, InvalidArgumentError, ValidationError
from sweetshop.models import Sweet
from sweetshop.store import DEFAULT_START_ID, SweetStore


@pytest.fixture
def store() -> SweetStore:
    """Empty store with the default start id."""
    return SweetStore()


class TestInsert:
    """insert() with caller-supplied ids."""

    def test_insert_makes_sweet_reachable(self, store: SweetStore) -> None:
        """Test that an inserted sweet can be fetched by its id."""
        sweet = Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20)
        store.insert(sweet)
        assert store.size() == 1
        assert store.get(1001) is sweet

    def test_insert_none_rejected(self, store: SweetStore) -> None:
        """Test that inserting None raises and stores nothing."""
        with pytest.raises(InvalidArgumentError):
            store.insert(None)
        assert store.size() == 0

    def test_duplicate_id_keeps_first(self, store: SweetStore) -> None:
        """Test that the second insert with the same id fails."""
        first = Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20)
        second = Sweet(1001, "Different Sweet", "Chocolate", 30.0, 10)
        store.insert(first)

        with pytest.raises(DuplicateIdError) as exc_info:
            store.insert(second)

        assert exc_info.value.sweet_id == 1001
        assert store.size() == 1
        assert store.get(1001).name == "Kaju Katli"


class TestGeneratedIds:
    """insert_with_generated_id() and the id counter."""

    def test_first_id_is_default_start(self, store: SweetStore) -> None:
        """Test that the first generated id is 1001."""
        sweet = store.insert_with_generated_id("Gulab Jamun", "Milk-Based", 10.0, 50)
        assert sweet.id == DEFAULT_START_ID == 1001
        assert store.get(1001) is sweet

    def test_ids_increase(self, store: SweetStore) -> None:
        """Test that consecutive generated ids go up by one."""
        a = store.insert_with_generated_id("A", "x", 1.0, 1)
        b = store.insert_with_generated_id("B", "x", 1.0, 1)
        assert b.id == a.id + 1

    def test_ids_never_reused_after_delete(self, store: SweetStore) -> None:
        """Test that a deleted sweet's id is not handed out again."""
        a = store.insert_with_generated_id("A", "x", 1.0, 1)
        store.remove(a.id)
        b = store.insert_with_generated_id("B", "x", 1.0, 1)
        assert b.id != a.id

    def test_ids_never_reused_after_clear(self, store: SweetStore) -> None:
        """Test that clear() leaves the counter running."""
        a = store.insert_with_generated_id("A", "x", 1.0, 1)
        store.clear()
        b = store.insert_with_generated_id("B", "x", 1.0, 1)
        assert b.id > a.id

    def test_invalid_fields_store_nothing(self, store: SweetStore) -> None:
        """Test that a failed construction neither stores nor advances the counter."""
        with pytest.raises(ValidationError):
            store.insert_with_generated_id("", "x", 1.0, 1)
        assert store.size() == 0
        assert store.next_id == DEFAULT_START_ID

    def test_fractional_quantity_stores_nothing(self, store: SweetStore) -> None:
        """Test that a fractional quantity is rejected instead of truncated."""
        with pytest.raises(ValidationError):
            store.insert_with_generated_id("A", "x", 1.0, 2.9)
        assert store.size() == 0
        assert store.next_id == DEFAULT_START_ID

    def test_skips_ids_taken_by_explicit_insert(self, store: SweetStore) -> None:
        """Test that the generator steps over ids already in use."""
        store.insert(Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20))
        store.insert(Sweet(1002, "Gajar Halwa", "Vegetable-Based", 30.0, 15))
        sweet = store.insert_with_generated_id("Jalebi", "Syrup-Based", 8.0, 60)
        assert sweet.id == 1003
        assert store.size() == 3

    def test_custom_start_id(self) -> None:
        """Test that start_id sets the first generated id."""
        store = SweetStore(start_id=5000)
        assert store.insert_with_generated_id("A", "x", 1.0, 1).id == 5000

    def test_stores_are_independent(self) -> None:
        """Test that each store keeps its own counter."""
        first = SweetStore()
        second = SweetStore()
        first.insert_with_generated_id("A", "x", 1.0, 1)
        first.insert_with_generated_id("B", "x", 1.0, 1)
        assert second.insert_with_generated_id("C", "x", 1.0, 1).id == DEFAULT_START_ID


class TestRemoveAndLookup:
    """remove(), get(), all() and the container helpers."""

    def test_remove_existing(self, store: SweetStore) -> None:
        """Test that remove() returns True and drops the sweet."""
        store.insert(Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20))
        assert store.remove(1001) is True
        assert store.get(1001) is None
        assert store.size() == 0

    def test_remove_missing_returns_false(self, store: SweetStore) -> None:
        """Test that removing an unknown id returns False."""
        assert store.remove(9999) is False

    def test_get_missing_returns_none(self, store: SweetStore) -> None:
        """Test that get() of an unknown id returns None."""
        assert store.get(9999) is None

    def test_all_is_snapshot(self, store: SweetStore) -> None:
        """Test that mutating the returned list does not touch the store."""
        store.insert(Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20))
        snapshot = store.all()
        snapshot.clear()
        assert store.size() == 1

    def test_all_empty(self, store: SweetStore) -> None:
        """Test that an empty store yields an empty list."""
        assert store.all() == []

    def test_dunder_helpers(self, store: SweetStore) -> None:
        """Test len(), in and iteration."""
        store.insert(Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20))
        assert len(store) == 1
        assert 1001 in store
        assert 1002 not in store
        assert [s.id for s in store] == [1001]

    def test_clear(self, store: SweetStore) -> None:
        """Test that clear() empties the store."""
        store.insert(Sweet(1001, "Kaju Katli", "Nut-Based", 50.0, 20))
        store.insert(Sweet(1002, "Gajar Halwa", "Vegetable-Based", 30.0, 15))
        store.clear()
        assert store.size() == 0
