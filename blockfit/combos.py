"""Available memory blocks and the selections a block allocation stands for."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import combinations, product

from blockfit.counting import count_combos, format_count

BOLD = "\033[1m"
RESET = "\033[0m"

Selection = tuple[tuple[int, int], ...]
"""A concrete choice of blocks as ``(block size, block number)`` pairs."""


@dataclass(frozen=True)
class BlockSet:
    """Block sizes and how many blocks of each size are available.

    ``sizes[i]`` and ``amounts[i]`` describe one block type; allocations
    are sequences giving, per type, how many blocks of it are used.
    """

    sizes: tuple[int, ...]
    amounts: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.sizes) != len(self.amounts):
            raise ValueError("sizes and amounts must have the same length")

    @classmethod
    def from_blocks(cls, blocks: Iterable[tuple[int, int]]) -> BlockSet:
        """Build a block set from ``(size, amount)`` pairs, keeping their order."""
        pairs = list(blocks)
        return cls(
            sizes=tuple(size for size, _ in pairs),
            amounts=tuple(amount for _, amount in pairs),
        )

    def __len__(self) -> int:
        return len(self.sizes)

    def _check(self, program_blocks: Sequence[int]) -> None:
        if len(program_blocks) != len(self):
            raise ValueError(
                f"allocation has {len(program_blocks)} entries, expected {len(self)}"
            )

    def count(self, program_blocks: Sequence[int]) -> int:
        """Return how many distinct block selections match the allocation."""
        self._check(program_blocks)
        return count_combos(program_blocks, self.amounts)

    def describe(self, program_blocks: Sequence[int]) -> str:
        """Describe the blocks used, e.g. ``x2 4-Byte Blocks, x1 2-Byte Block``."""
        self._check(program_blocks)
        parts = []
        for used, size in zip(program_blocks, self.sizes):
            if used > 0:
                plural = "s" if used > 1 else ""
                parts.append(f"x{used} {size}-Byte Block{plural}")
        return ", ".join(parts)

    def selections(self, program_blocks: Sequence[int]) -> Iterator[Selection]:
        """Yield every concrete selection of numbered blocks for the allocation.

        Blocks of each type are numbered from 1; the first block type varies
        slowest.
        """
        self._check(program_blocks)
        per_type = [
            [tuple((size, number) for number in chosen)
             for chosen in combinations(range(1, amount + 1), used)]
            for used, size, amount in zip(program_blocks, self.sizes, self.amounts)
        ]
        for parts in product(*per_type):
            yield tuple(pair for part in parts for pair in part)

    def format_combo(self, program_blocks: Sequence[int]) -> str:
        """Render an allocation: its count, its description and every selection."""
        lines = [
            f"\n\n{BOLD}{format_count(self.count(program_blocks))}"
            f" Possible Combinations containing:\n"
            f"{self.describe(program_blocks)}{RESET}\n\n"
        ]
        for selection in self.selections(program_blocks):
            lines.append(
                "".join(f"{size}({number}) " for size, number in selection) + "\n"
            )
        return "".join(lines)