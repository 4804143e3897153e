"""Counting how many distinct block selections make up an allocation."""

from __future__ import annotations

import math
from collections.abc import Iterable

PLAIN_DIGITS = 10
"""Counts with at most this many digits are shown in full."""

SCI_DIGITS = 5
"""Number of significant digits shown in scientific notation."""


def binomial(n: int, k: int) -> int:
    """Return C(n, k), the number of ways to choose k items from n.

    Choosing more items than are available yields 0.
    """
    if n < 0 or k < 0:
        raise ValueError(f"binomial arguments must be non-negative, got n={n}, k={k}")
    return math.comb(n, k)


def count_combos(program_blocks: Iterable[int], block_amounts: Iterable[int]) -> int:
    """Return the number of ways to pick the given blocks from those available.

    ``program_blocks[i]`` blocks are chosen from the ``block_amounts[i]``
    blocks of the same size. If any type asks for more blocks than exist,
    the count is 0.
    """
    result = 1
    for chosen, available in zip(program_blocks, block_amounts, strict=True):
        if chosen > available:
            return 0
        if chosen == 0 or chosen == available:
            continue
        result *= binomial(available, chosen)
    return result


def _digits(value: int) -> str:
    if value < 0:
        raise ValueError(f"count must be non-negative, got {value}")
    return str(value)


def format_count(value: int) -> str:
    """Format a count for display.

    Counts of up to ten digits are written in full; larger ones as the
    leading digit, up to four further digits and a ``e+`` exponent.
    """
    digits = _digits(value)
    if len(digits) <= PLAIN_DIGITS:
        return digits
    mantissa = digits[1:SCI_DIGITS]
    return f"{digits[0]}.{mantissa}e+{len(digits) - 1}"


def to_sci(value: int) -> str:
    """Return a count in fixed scientific form, e.g. ``1.9229e190``.

    The mantissa always has four digits after the point, padded with zeros
    and truncated rather than rounded.
    """
    digits = _digits(value)
    mantissa = digits[1:SCI_DIGITS].ljust(SCI_DIGITS - 1, "0")
    return f"{digits[0]}.{mantissa}e{len(digits) - 1}"