"""
Bounded, ordered in-memory record store.

A RecordStore holds records of one type, identified by a key function, and
declares one of two sort disciplines:

- AUTO: the store re-sorts itself after every insert, so it is always in key
  order (the earthquake-risk registry).
- ON_DEMAND: records stay in insertion order until sort_by_key() is called
  (the heat-index store).

Mutations either apply completely or raise a StoreError and leave the store
untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from quwatro.errors import CapacityExceeded, DuplicateKeyError, IndexOutOfRange
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

R = TypeVar("R")


class SortDiscipline(str, Enum):
    AUTO = "auto"
    ON_DEMAND = "on_demand"


def _normalize(key: Any) -> Any:
    """Comparison form of a key: strings compare case-insensitively."""
    return key.casefold() if isinstance(key, str) else key


class RecordStore(Generic[R]):
    """
    Ordered record container with an optional fixed capacity.

    Parameters
    ----------
    key : Callable[[R], Any]
        Extracts the identifying/sort key of a record.
    name : str
        Short label used in log messages.
    capacity : int | None
        Maximum number of records; None for an unbounded store.
    discipline : SortDiscipline
        Whether the store keeps itself sorted after each insert.
    unique_keys : bool
        Reject records whose key matches an existing one (case-insensitive).
    records : Iterable[R]
        Initial contents, loaded atomically through extend().
    """

    def __init__(
        self,
        key: Callable[[R], Any],
        *,
        name: str = "records",
        capacity: Optional[int] = None,
        discipline: SortDiscipline = SortDiscipline.ON_DEMAND,
        unique_keys: bool = False,
        records: Iterable[R] = (),
    ) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._key = key
        self.name = name
        self._capacity = capacity
        self.discipline = discipline
        self.unique_keys = unique_keys
        self._items: List[R] = []
        self.extend(records)

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def is_bounded(self) -> bool:
        return self._capacity is not None

    @property
    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[R]:
        return iter(self.all())

    def __repr__(self) -> str:
        bound = self._capacity if self._capacity is not None else "unbounded"
        return f"RecordStore(name={self.name!r}, size={self.size}, capacity={bound})"

    def key_of(self, record: R) -> Any:
        return self._key(record)

    def get(self, index: int) -> R:
        self._check_index(index)
        return self._items[index]

    def insert(self, record: R) -> int:
        """
        Add a record and return the index it ended up at.

        Raises CapacityExceeded when the store is full and DuplicateKeyError
        when unique keys are enforced and the key is already present.
        """
        if self.is_full:
            log.warning(
                "Insert rejected: store full",
                extra={"store": self.name, "capacity": self._capacity},
            )
            raise CapacityExceeded(self._capacity or 0)
        key = self._key(record)
        if self.unique_keys and self.index_of_key(key) is not None:
            log.warning("Insert rejected: duplicate key", extra={"store": self.name, "key": key})
            raise DuplicateKeyError(str(key))

        self._items.append(record)
        if self.discipline is SortDiscipline.AUTO:
            self.sort_by_key()
            index = next(i for i, item in enumerate(self._items) if item is record)
        else:
            index = len(self._items) - 1
        log.debug("Record inserted", extra={"store": self.name, "index": index, "size": self.size})
        return index

    def extend(self, records: Iterable[R]) -> None:
        """Insert many records at once; nothing is added if any would be rejected."""
        incoming = list(records)
        if not incoming:
            return
        if self._capacity is not None and len(self._items) + len(incoming) > self._capacity:
            raise CapacityExceeded(self._capacity)
        if self.unique_keys:
            seen = {_normalize(self._key(item)) for item in self._items}
            for record in incoming:
                normalized = _normalize(self._key(record))
                if normalized in seen:
                    raise DuplicateKeyError(str(self._key(record)))
                seen.add(normalized)
        self._items.extend(incoming)
        if self.discipline is SortDiscipline.AUTO:
            self.sort_by_key()

    def delete_at(self, index: int) -> R:
        """
        Remove and return the record at index.

        Later records shift one position left, preserving their relative order.
        """
        self._check_index(index)
        removed = self._items.pop(index)
        log.debug("Record deleted", extra={"store": self.name, "index": index, "size": self.size})
        return removed

    def search_by_key(self, key: Any) -> Optional[R]:
        """First record whose key matches (case-insensitive for strings), else None."""
        index = self.index_of_key(key)
        return None if index is None else self._items[index]

    def index_of_key(self, key: Any) -> Optional[int]:
        target = _normalize(key)
        for i, item in enumerate(self._items):
            if _normalize(self._key(item)) == target:
                return i
        return None

    def search_by_value(self, value: Any) -> List[int]:
        """Indices of every record whose key equals value exactly."""
        return [i for i, item in enumerate(self._items) if self._key(item) == value]

    def sort_by_key(self) -> None:
        """Stable in-place ascending sort by key."""
        self._items.sort(key=lambda item: _normalize(self._key(item)))

    def filter(self, predicate: Callable[[R], bool]) -> List[R]:
        return [item for item in self._items if predicate(item)]

    def all(self) -> List[R]:
        """Snapshot of the current contents, in store order."""
        return list(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))


__all__ = ["RecordStore", "SortDiscipline"]
