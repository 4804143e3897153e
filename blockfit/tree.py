"""Allocations grouped and ordered by how many blocks they use."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from blockfit.combos import BlockSet

NO_ALLOCATIONS = (
    "\nNo valid memory allocations are possible to fulfill program requirements\n\n"
)


@dataclass
class _Node:
    num_blocks: int
    combos: list[tuple[int, ...]] = field(default_factory=list)
    left: _Node | None = None
    right: _Node | None = None

    def newest_first(self) -> Iterator[tuple[int, ...]]:
        return reversed(self.combos)


class ComboTree:
    """A binary search tree of allocations keyed by their total block count.

    Allocations with the same block count share a node and come out newest
    first; nodes come out in increasing block count.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._height = 0
        self._size = 0

    @property
    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return self._height

    def insert(self, program_blocks: Iterable[int]) -> None:
        """Store a copy of the allocation under its total block count."""
        combo = tuple(program_blocks)
        num_blocks = sum(combo)
        self._size += 1

        if self._root is None:
            self._root = _Node(num_blocks, [combo])
            self._height = 1
            return

        node = self._root
        depth = 1
        while True:
            if num_blocks == node.num_blocks:
                node.combos.append(combo)
                return
            side = "left" if num_blocks < node.num_blocks else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(num_blocks, [combo]))
                self._height = max(self._height, depth + 1)
                return
            node = child
            depth += 1

    def _nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        for node in self._nodes():
            yield from node.newest_first()

    def __len__(self) -> int:
        return self._size

    def render(self, block_set: BlockSet) -> str:
        """Render every allocation, grouped under a heading per block count."""
        if self._root is None:
            return NO_ALLOCATIONS + "\n\n"
        parts = []
        for node in self._nodes():
            parts.append(
                f"\n\n\033[1;4;31mAllocations With {node.num_blocks} Blocks:\033[0m"
            )
            parts.extend(block_set.format_combo(combo) for combo in node.newest_first())
        parts.append("\n\n")
        return "".join(parts)