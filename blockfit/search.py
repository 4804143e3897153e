"""Search for every block allocation that exactly fills a program's size."""

from __future__ import annotations

from blockfit.combos import BlockSet
from blockfit.tree import ComboTree


def find_allocations(program_size: int, block_set: BlockSet) -> ComboTree:
    """Return a tree of every allocation whose blocks add up to ``program_size``.

    Each block type is tried from as many blocks as fit down to none, so
    allocations are found in the order of that depth-first search.
    """
    tree = ComboTree()
    sizes = block_set.sizes
    amounts = block_set.amounts
    used = [0] * len(block_set)

    def search(index: int, mem_used: int) -> None:
        if index >= len(used):
            return

        size = sizes[index]
        while mem_used < program_size and used[index] < amounts[index]:
            mem_used += size
            used[index] += 1

        if mem_used == program_size:
            tree.insert(used)
        elif mem_used < program_size:
            search(index + 1, mem_used)

        while used[index] > 0:
            mem_used -= size
            used[index] -= 1
            search(index + 1, mem_used)

    search(0, 0)
    return tree