from __future__ import annotations

from dataclasses import dataclass

import pytest

from quwatro.apps.quakeguard import build_registry
from quwatro.domain.models import Location, LocationKind, RiskLevel
from quwatro.domain.validation import LOCATION_FIELDS
from quwatro.errors import CapacityExceeded, DuplicateKeyError, IndexOutOfRange
from quwatro.store.record_store import RecordStore, SortDiscipline

SEEDED_LOCATION_COUNT = 43


@dataclass(frozen=True)
class Item:
    key: str
    value: int = 0


def _store(*keys: str, capacity: int | None = None, **kwargs) -> RecordStore[Item]:
    return RecordStore(
        key=lambda item: item.key,
        capacity=capacity,
        records=[Item(k, i) for i, k in enumerate(keys)],
        **kwargs,
    )


def _location(name: str, risk: str = "High") -> Location:
    return Location(
        name=name,
        kind=LocationKind.CITY,
        risk_level=risk,
        historical_quakes=10,
        last_magnitude=6.0,
        fault_distance_km=12.0,
    )


def test_insert_beyond_capacity_fails_without_mutation() -> None:
    capacity = 3
    store = _store(capacity=capacity)
    for i in range(capacity):
        assert store.insert(Item(f"k{i}")) == i
    before = store.all()

    with pytest.raises(CapacityExceeded) as excinfo:
        store.insert(Item("overflow"))

    assert excinfo.value.capacity == capacity
    assert store.size == capacity
    assert store.is_full
    assert store.all() == before


@pytest.mark.parametrize("size", [1, 2, 5])
def test_delete_at_shifts_later_records_left(size: int) -> None:
    for index in range(size):
        store = _store(*[f"k{i}" for i in range(size)])
        original = store.all()

        removed = store.delete_at(index)

        assert removed == original[index]
        assert store.size == size - 1
        assert store.all() == original[:index] + original[index + 1 :]
        if index + 1 < size:
            assert store.get(index) == original[index + 1]


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_delete_at_invalid_index_leaves_store_unchanged(index: int) -> None:
    store = _store("a", "b", "c")
    before = store.all()

    with pytest.raises(IndexOutOfRange):
        store.delete_at(index)

    assert store.all() == before


def test_delete_from_empty_store_reports_empty() -> None:
    with pytest.raises(IndexOutOfRange, match="empty"):
        _store().delete_at(0)


def test_sort_is_idempotent_and_stable_for_equal_keys() -> None:
    store = RecordStore(key=lambda item: item.key)
    for item in [Item("b", 1), Item("a", 1), Item("B", 2), Item("a", 2)]:
        store.insert(item)

    store.sort_by_key()
    first = store.all()
    store.sort_by_key()

    assert store.all() == first
    # Equal keys keep insertion order; string keys compare case-insensitively.
    assert first == [Item("a", 1), Item("a", 2), Item("b", 1), Item("B", 2)]


def test_numeric_sort_is_ascending() -> None:
    store = RecordStore(key=lambda value: value, records=[3.5, -1.0, 2.25, 3.5])
    store.sort_by_key()
    assert store.all() == [-1.0, 2.25, 3.5, 3.5]


def test_on_demand_store_keeps_insertion_order_until_sorted() -> None:
    store = _store("c", "a", "b")
    assert store.discipline is SortDiscipline.ON_DEMAND
    assert [item.key for item in store] == ["c", "a", "b"]

    assert store.insert(Item("0")) == 3
    assert [item.key for item in store] == ["c", "a", "b", "0"]

    store.sort_by_key()
    assert [item.key for item in store] == ["0", "a", "b", "c"]


def test_auto_sorted_registry_places_new_location_alphabetically() -> None:
    registry = build_registry(locations=[_location("Antipolo City"), _location("Albay")])
    assert [loc.name for loc in registry] == ["Albay", "Antipolo City"]

    risk = LOCATION_FIELDS.validate("risk_level", "moderate")
    index = registry.insert(_location("Baguio", risk))

    assert index == 2
    assert [loc.name for loc in registry] == ["Albay", "Antipolo City", "Baguio"]
    assert registry.get(2).risk_level is RiskLevel.MODERATE


def test_auto_sorted_insert_returns_position_after_sort() -> None:
    registry = build_registry(locations=[_location("Cebu City"), _location("Manila")])
    assert registry.insert(_location("abra")) == 0
    assert registry.insert(_location("Davao City")) == 2


def test_unique_keys_reject_case_insensitive_duplicates() -> None:
    registry = build_registry(locations=[_location("Albay")])

    with pytest.raises(DuplicateKeyError):
        registry.insert(_location("ALBAY"))

    assert registry.size == 1


def test_search_by_key_is_case_insensitive_first_match() -> None:
    store = _store("Manila", "manila", "Cebu")
    assert store.search_by_key("MANILA") == Item("Manila", 0)
    assert store.search_by_key("Davao") is None
    assert store.index_of_key("cebu") == 2


def test_search_by_value_returns_every_exact_match() -> None:
    store = RecordStore(key=lambda value: value, records=[40.41, 38.2, 40.41, 40.4])
    assert store.search_by_value(40.41) == [0, 2]
    assert store.search_by_value(99.0) == []


def test_filter_and_all_return_copies() -> None:
    store = _store("a", "b", "c")

    matches = store.filter(lambda item: item.key != "b")
    snapshot = store.all()
    snapshot.clear()
    matches.clear()

    assert store.size == 3
    assert [item.key for item in store.filter(lambda item: item.key == "b")] == ["b"]


def test_extend_is_all_or_nothing() -> None:
    store = _store("a", capacity=2)
    with pytest.raises(CapacityExceeded):
        store.extend([Item("b"), Item("c")])
    assert [item.key for item in store] == ["a"]

    unique = _store("a", unique_keys=True)
    with pytest.raises(DuplicateKeyError):
        unique.extend([Item("b"), Item("A")])
    assert unique.size == 1


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        RecordStore(key=lambda item: item, capacity=0)


def test_seeded_registry_is_alphabetical_and_unbounded() -> None:
    registry = build_registry()
    names = [loc.name for loc in registry]

    assert registry.size == SEEDED_LOCATION_COUNT
    assert not registry.is_bounded
    assert names == sorted(names, key=str.casefold)
    assert registry.search_by_key("manila").risk_level is RiskLevel.HIGH
