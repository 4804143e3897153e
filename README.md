# blockfit

blockfit finds every way a program of a given size can fill a set of free
memory blocks exactly. You give it the program size in bytes. You also give
it the sizes of the free blocks and how many of each there are. It then
lists every allocation whose blocks add up to exactly that many bytes.
Allocations are grouped by how many blocks they use, fewest first. For each
allocation it also shows how many distinct selections of individual blocks
it stands for.

## Installation

```
pip install .
```

## Command line

Pass the program size in bytes as the only argument:

```
blockfit 12
```

`python -m blockfit.cli 12` does the same.

If the argument is missing, there is more than one argument, or it is not a
positive integer that fits in 32 bits, a short help text is printed and the
program stops.

After that, the program asks for free blocks one at a time:

```
Please enter the size (Bytes) of a free memory block: 4
Please enter the number of 4-Byte blocks available: 3
Please enter the size (Bytes) of a free memory block: 2
Please enter the number of 2-Byte blocks available: 2
Please enter the size (Bytes) of a free memory block:
```

- If you enter a size that was given before, its amount is added to the
  earlier entry.
- To stop entering blocks, press Enter on an empty line, type `exit`, or end
  the input. If you do this at the amount prompt, the size just entered is
  dropped.
- Every number must be a positive integer. Spaces before and after it are
  allowed. If the input is not valid, `Invalid Input: Please enter a positive
  integer` is printed and the program asks again.

Block types are kept with the most recently entered size first. Allocations
and selections list the block types in that order.

The output has one heading for each block count. Under each heading are the
allocations with that many blocks, most recently found first. Each
allocation shows:

- the number of distinct block selections it allows;
- the block sizes it uses, for example `x3 4-Byte Blocks`;
- every concrete selection, one per line. Blocks of each size are numbered
  from 1. For example, `2(2) 4(1) 4(3)` means the second 2-byte block and the
  first and third 4-byte blocks.

Counts of more than ten digits are shown in scientific notation: the first
digit, up to four more digits, and the exponent, as in `1.9229e+190`. The
digits are cut off, not rounded.

If no exact fit exists, the program prints
`No valid memory allocations are possible to fulfill program requirements`.

Headings and counts use ANSI escape codes for bold, underline and colour.

## Library use

```python
from blockfit.combos import BlockSet
from blockfit.search import find_allocations

blocks = BlockSet.from_blocks([(4, 3), (2, 2)])   # (size, amount) pairs
tree = find_allocations(12, blocks)

for allocation in tree:          # blocks used per type, fewest blocks first
    print(allocation, blocks.count(allocation))

print(tree.render(blocks))       # the same text the command prints
```

The modules:

- `blockfit.counting`: `binomial(n, k)`, and `count_combos(program_blocks,
  block_amounts)`, which returns the number of selections as an exact Python
  integer. `format_count(value)` gives the display form shown above.
  `to_sci(value)` always gives fixed scientific form with four digits after
  the point, such as `1.9229e190`.
- `blockfit.blocklist`: `BlockList`, a list of `(size, amount)` pairs with
  `add`, `increment`, `len()` and iteration from newest to oldest.
- `blockfit.combos`: `BlockSet`, the available block types, with `count`,
  `describe`, `selections` and `format_combo` for a given allocation.
- `blockfit.tree`: `ComboTree`, allocations ordered by total block count, with
  `insert`, iteration, `len()`, `height` and `render`.
- `blockfit.search`: `find_allocations(program_size, block_set)`.
- `blockfit.cli`: `parse_pos_int`, `prompt_int`, `read_blocks`, `run` and
  `main`. The input and output functions take `read_line` and `write`
  callables, which default to standard input and standard output.