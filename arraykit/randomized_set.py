"""A set of integers with constant-time insert, remove and random pick."""

from __future__ import annotations

import random
from collections.abc import Hashable, Iterator


class RandomizedSet:
    """Set supporting O(1) insertion, removal and uniform random selection."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._values: list[Hashable] = []
        self._index: dict[Hashable, int] = {}

    def insert(self, val: Hashable) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._index:
            return False
        self._index[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: Hashable) -> bool:
        """Remove ``val``; return False if it was not present."""
        idx = self._index.pop(val, None)
        if idx is None:
            return False
        last = self._values.pop()
        if idx < len(self._values):
            # Fill the hole with the former last element.
            self._values[idx] = last
            self._index[last] = idx
        return True

    def get_random(self) -> Hashable:
        """Return a uniformly chosen member of the set."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._values))