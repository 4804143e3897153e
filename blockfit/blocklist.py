"""An ordered collection of (block size, amount) pairs."""

from __future__ import annotations

from collections.abc import Iterator


class BlockList:
    """Block sizes with how many blocks of each are available.

    Iteration yields ``(size, amount)`` pairs, most recently added first.
    """

    def __init__(self) -> None:
        self._entries: list[list[int]] = []

    def add(self, size: int, amount: int) -> None:
        """Add a new entry, even if the size is already present."""
        self._entries.append([size, amount])

    def increment(self, size: int, amount: int) -> None:
        """Add ``amount`` to the entry for ``size``, or add a new entry."""
        for entry in reversed(self._entries):
            if entry[0] == size:
                entry[1] += amount
                return
        self.add(size, amount)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        for size, amount in reversed(self._entries):
            yield size, amount