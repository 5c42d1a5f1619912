from __future__ import annotations

from typing import List

from bluenoise.rng import UniformSource

__all__ = ["ActiveList"]


class ActiveList:
    """Indices of samples that may still spawn candidates.

    Order is not meaningful: removal swaps the last entry into the freed
    slot so both pick and removal are O(1).
    """

    def __init__(self) -> None:
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, index: int) -> bool:
        return index in self._items

    def add(self, index: int) -> None:
        self._items.append(index)

    def remove_at(self, position: int) -> int:
        """Drop the entry at ``position`` and return the sample index it held."""
        items = self._items
        removed = items[position]
        last = items.pop()
        if position < len(items):
            items[position] = last
        return removed

    def pick_random(self, source: UniformSource) -> tuple[int, int]:
        """Return ``(position, sample_index)`` chosen uniformly.

        Consumes exactly one draw from ``source``.
        """
        n = len(self._items)
        if n == 0:
            raise IndexError("pick from an empty active list")
        pos = min(int(source.random() * n), n - 1)
        return pos, self._items[pos]

    def is_empty(self) -> bool:
        return not self._items
