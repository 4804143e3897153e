import pytest

from blockfit.blocklist import BlockList
from blockfit.combos import BlockSet
from blockfit.counting import to_sci


@pytest.fixture
def block_set():
    blocks = BlockList()
    for size, amount in [(1, 4), (2, 1), (3, 4), (4, 2), (5, 2), (6, 1), (7, 3)]:
        blocks.add(size, amount)
    return BlockSet.from_blocks(blocks)


def test_init(block_set):
    assert len(block_set) == 7
    assert block_set.sizes == (7, 6, 5, 4, 3, 2, 1)
    assert block_set.amounts == (3, 1, 2, 2, 4, 1, 4)


@pytest.mark.parametrize(
    "program_blocks, expected",
    [
        ([1, 1, 1, 1, 1, 1, 1], 192),
        ([3, 0, 0, 2, 4, 0, 0], 1),
        ([2, 0, 1, 0, 2, 0, 3], 144),
    ],
)
def test_count(block_set, program_blocks, expected):
    assert block_set.count(program_blocks) == expected


def test_count_too_many_blocks(block_set):
    assert block_set.count([4, 0, 0, 0, 0, 0, 0]) == 0


def test_count_wrong_length(block_set):
    with pytest.raises(ValueError):
        block_set.count([1, 1])


def test_from_blocks_merges_increments():
    blocks = BlockList()
    blocks.increment(8, 2)
    blocks.increment(4, 1)
    blocks.increment(8, 3)
    block_set = BlockSet.from_blocks(blocks)
    assert block_set.sizes == (4, 8)
    assert block_set.amounts == (1, 5)


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        BlockSet(sizes=(1, 2), amounts=(3,))


def test_describe():
    block_set = BlockSet.from_blocks([(4, 3), (2, 2), (1, 5)])
    assert block_set.describe([2, 0, 1]) == "x2 4-Byte Blocks, x1 1-Byte Block"


def test_selections_order():
    block_set = BlockSet.from_blocks([(4, 3), (2, 2)])
    result = list(block_set.selections([2, 1]))
    assert result == [
        ((4, 1), (4, 2), (2, 1)),
        ((4, 1), (4, 2), (2, 2)),
        ((4, 1), (4, 3), (2, 1)),
        ((4, 1), (4, 3), (2, 2)),
        ((4, 2), (4, 3), (2, 1)),
        ((4, 2), (4, 3), (2, 2)),
    ]


def test_selections_match_count(block_set):
    program_blocks = [2, 0, 1, 0, 2, 0, 3]
    assert len(list(block_set.selections(program_blocks))) == block_set.count(program_blocks)


def test_selections_nothing_used():
    block_set = BlockSet.from_blocks([(4, 3)])
    assert list(block_set.selections([0])) == [()]


def test_selections_impossible():
    block_set = BlockSet.from_blocks([(4, 1)])
    assert list(block_set.selections([2])) == []


def test_format_combo():
    block_set = BlockSet.from_blocks([(4, 2), (2, 1)])
    text = block_set.format_combo([1, 1])
    assert text == (
        "\n\n\033[1m2 Possible Combinations containing:\n"
        "x1 4-Byte Block, x1 2-Byte Block\033[0m\n\n"
        "4(1) 2(1) \n"
        "4(2) 2(1) \n"
    )