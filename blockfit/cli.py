"""Command line front end: read the free blocks and list every allocation."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

from blockfit.blocklist import BlockList
from blockfit.combos import BlockSet
from blockfit.search import find_allocations
from blockfit.tree import ComboTree

INT_MAX = 2**31 - 1

HELP = (
    "Exactly 1 command line argument must be passed to the program\n"
    "Please run again, passing the size of the program in bytes as argument\n"
    "Argument must be a positive integer\n"
)

INVALID_INPUT = "Invalid Input: Please enter a positive integer\n"

_SPACE = " \t\n\v\f\r"
_POS_INT = re.compile(rf"[{_SPACE}]*([+-]?[0-9]+)[{_SPACE}]*")

ReadLine = Callable[[], str]
Write = Callable[[str], object]


def parse_pos_int(text: str) -> int:
    """Parse a positive integer that fits in 32 bits.

    Leading and trailing whitespace is allowed; anything else raises
    ``ValueError``.
    """
    match = _POS_INT.fullmatch(text or "")
    if match is None:
        raise ValueError(f"not a positive integer: {text!r}")
    value = int(match.group(1))
    if value <= 0 or value > INT_MAX:
        raise ValueError(f"not a positive integer: {text!r}")
    return value


def _io(read_line: ReadLine | None, write: Write | None) -> tuple[ReadLine, Write]:
    return (read_line or sys.stdin.readline, write or sys.stdout.write)


def prompt_int(
    prompt: str, read_line: ReadLine | None = None, write: Write | None = None
) -> int | None:
    """Ask until a positive integer is entered.

    Returns ``None`` when the answer is empty, ``exit`` or input has ended.
    """
    read_line, write = _io(read_line, write)
    while True:
        write(prompt)
        answer = read_line().split("\n", 1)[0]
        if answer in ("", "exit"):
            return None
        try:
            return parse_pos_int(answer)
        except ValueError:
            write(INVALID_INPUT)


def read_blocks(read_line: ReadLine | None = None, write: Write | None = None) -> BlockSet:
    """Collect block sizes and amounts until the user stops entering them."""
    read_line, write = _io(read_line, write)
    blocks = BlockList()
    while True:
        size = prompt_int(
            "Please enter the size (Bytes) of a free memory block: ", read_line, write
        )
        if size is None:
            break
        amount = prompt_int(
            f"Please enter the number of {size}-Byte blocks available: ",
            read_line,
            write,
        )
        if amount is None:
            break
        blocks.increment(size, amount)
    return BlockSet.from_blocks(blocks)


def run(
    program_size: int, read_line: ReadLine | None = None, write: Write | None = None
) -> ComboTree:
    """Read the available blocks, then write every allocation for the program."""
    read_line, write = _io(read_line, write)
    block_set = read_blocks(read_line, write)
    tree = find_allocations(program_size, block_set)
    write(tree.render(block_set))
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: the single argument is the program size in bytes."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write(HELP)
        return 0
    try:
        program_size = parse_pos_int(args[0])
    except ValueError:
        sys.stdout.write(HELP)
        return 0
    run(program_size, sys.stdin.readline, sys.stdout.write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())