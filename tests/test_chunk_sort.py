import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.chunk import Chunk, Loc
from pushswap.chunk_sort import (
    chunk_sort,
    chunk_split,
    rec_chunk_sort,
    split_locations,
    third_pivots,
)
from pushswap.stack import Op, PushSwap


def _replay_sorts(ranks, ops):
    data = PushSwap(ranks, recording=False)
    for op in ops:
        data.apply(op)
    return data.is_sorted()


permutations = st.integers(min_value=1, max_value=80).flatmap(
    lambda n: st.permutations(list(range(1, n + 1)))
)


@pytest.mark.parametrize(
    "loc, expected",
    [
        (Loc.TOP_A, (Loc.BOTTOM_B, Loc.TOP_B, Loc.BOTTOM_A)),
        (Loc.BOTTOM_A, (Loc.BOTTOM_B, Loc.TOP_B, Loc.TOP_A)),
        (Loc.TOP_B, (Loc.BOTTOM_B, Loc.BOTTOM_A, Loc.TOP_A)),
        (Loc.BOTTOM_B, (Loc.TOP_B, Loc.BOTTOM_A, Loc.TOP_A)),
    ],
)
def test_split_locations(loc, expected):
    dest = split_locations(loc)
    assert (dest.min.loc, dest.mid.loc, dest.max.loc) == expected
    assert (dest.min.size, dest.mid.size, dest.max.size) == (0, 0, 0)


@pytest.mark.parametrize("loc", list(Loc))
def test_third_pivots_are_ordered(loc):
    for size in range(1, 120):
        pivot_1, pivot_2 = third_pivots(loc, size)
        assert 0 <= pivot_2 <= pivot_1 <= size


def test_third_pivots_small_a_chunk_keeps_everything_off_min():
    assert third_pivots(Loc.TOP_A, 10)[0] == 10
    assert third_pivots(Loc.BOTTOM_A, 14)[0] == 14


def test_third_pivots_large_top_a():
    assert third_pivots(Loc.TOP_A, 30) == (20, 10)


def test_chunk_split_partitions_top_a():
    ranks = list(range(1, 31))
    random.Random(7).shuffle(ranks)
    data = PushSwap(ranks)
    chunk = Chunk(Loc.TOP_A, 30)
    dest = chunk_split(data, chunk)

    assert chunk.size == 0
    assert sorted(list(data.a) + list(data.b)) == list(range(1, 31))
    assert dest.min.size + dest.mid.size == len(data.b)
    if data.a and data.b:
        assert max(data.b) < min(data.a)
    b_values = list(data.b)
    mid_part = b_values[: dest.mid.size]
    min_part = b_values[dest.mid.size:]
    if mid_part and min_part:
        assert min(mid_part) > max(min_part)


def test_rec_chunk_sort_two_values():
    data = PushSwap([2, 1])
    chunk = Chunk(Loc.TOP_A, 2)
    rec_chunk_sort(data, chunk)
    assert data.ops == [Op.SA]
    assert chunk.size == 0
    assert data.is_sorted()


def test_chunk_sort_reverse_order():
    ranks = list(range(40, 0, -1))
    data = PushSwap(ranks)
    chunk_sort(data)
    assert data.is_sorted()
    assert len(data.b) == 0
    assert _replay_sorts(ranks, data.ops)


@settings(max_examples=60, deadline=None)
@given(permutations)
def test_chunk_sort_sorts_any_permutation(ranks):
    data = PushSwap(list(ranks))
    chunk_sort(data)
    assert data.is_sorted()
    assert _replay_sorts(list(ranks), data.ops)