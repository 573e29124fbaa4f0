"""A hash table with separate chaining, plus the hash helpers it is used with."""

from __future__ import annotations

from collections.abc import Callable

HashFunc = Callable[[int, int], int]


def multiplicative_hash(key: int, size: int) -> int:
    """Return ``3 * key`` modulo ``size``."""
    return (3 * key) % size


def linear_probe(hash_value: int, size: int) -> int:
    """Return the next slot after ``hash_value`` in a table of ``size`` slots."""
    return (hash_value + 1) % size


class ChainedHashTable:
    """Fixed-size table of chains; new keys go to the head of their chain."""

    def __init__(self, size: int, hash_func: HashFunc = multiplicative_hash) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.hash_func = hash_func
        self._chains: list[list[int]] = [[] for _ in range(size)]
        self._count = 0

    def _slot(self, key: int) -> int:
        return self.hash_func(key, self.size)

    def search(self, key: int) -> int | None:
        """Return the index of the chain holding ``key``, or None if absent."""
        slot = self._slot(key)
        return slot if key in self._chains[slot] else None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def insert(self, key: int) -> bool:
        """Add ``key`` at the head of its chain; return False if already present."""
        if self.search(key) is not None:
            return False
        self._chains[self._slot(key)].insert(0, key)
        self._count += 1
        return True

    def delete(self, key: int) -> int:
        """Remove ``key`` and return it; raise KeyError if it is absent."""
        slot = self.search(key)
        if slot is None:
            raise KeyError(key)
        self._chains[slot].remove(key)
        self._count -= 1
        return key

    def __len__(self) -> int:
        return self._count

    def buckets(self) -> list[tuple[int, ...]]:
        """Return each chain's keys, head first."""
        return [tuple(chain) for chain in self._chains]


def format_table(table: ChainedHashTable) -> str:
    """Render every slot as ``\\n<i> :`` followed by `` <key> `` for each key."""
    return "".join(
        f"\n{index} :" + "".join(f" {key} " for key in chain)
        for index, chain in enumerate(table.buckets())
    )