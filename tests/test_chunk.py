from collections import Counter

import pytest

from pushswap.chunk import (
    Chunk,
    Loc,
    SplitDest,
    chunk_max_value,
    chunk_to_the_top,
    chunk_value,
    loc_to_stack,
    move_from_to,
)
from pushswap.stack import Op, PushSwap, Stack


def make(a, b=()):
    data = PushSwap(list(a) + list(b))
    data.a = Stack(data.size, a)
    data.b = Stack(data.size, b)
    return data


def test_loc_to_stack():
    data = make([1, 2], [3])
    assert loc_to_stack(data, Loc.TOP_A) is data.a
    assert loc_to_stack(data, Loc.BOTTOM_A) is data.a
    assert loc_to_stack(data, Loc.TOP_B) is data.b
    assert loc_to_stack(data, Loc.BOTTOM_B) is data.b


def test_chunk_value_reads_from_each_end():
    data = make([1, 2, 3], [4, 5, 6])
    assert chunk_value(data, Chunk(Loc.TOP_A, 3), 1) == 1
    assert chunk_value(data, Chunk(Loc.TOP_A, 3), 2) == 2
    assert chunk_value(data, Chunk(Loc.BOTTOM_A, 3), 1) == 3
    assert chunk_value(data, Chunk(Loc.BOTTOM_A, 3), 3) == 1
    assert chunk_value(data, Chunk(Loc.TOP_B, 3), 1) == 4
    assert chunk_value(data, Chunk(Loc.BOTTOM_B, 3), 2) == 5


def test_chunk_max_value():
    data = make([2, 6, 1, 5], [3, 4])
    assert chunk_max_value(data, Chunk(Loc.TOP_A, 2)) == 6
    assert chunk_max_value(data, Chunk(Loc.TOP_A, 1)) == 2
    assert chunk_max_value(data, Chunk(Loc.BOTTOM_A, 2)) == 5
    assert chunk_max_value(data, Chunk(Loc.BOTTOM_B, 2)) == 4
    assert chunk_max_value(data, Chunk(Loc.TOP_B, 0)) == 0


_PAIRS = [(s, t) for s in Loc for t in Loc if s is not t]


@pytest.mark.parametrize("source,target", _PAIRS)
def test_move_places_value_at_target(source, target):
    data = make([1, 2, 3], [4, 5, 6])
    moved = chunk_value(data, Chunk(source, 1), 1)
    before = Counter(list(data.a) + list(data.b))
    move_from_to(data, source, target)
    assert chunk_value(data, Chunk(target, 1), 1) == moved
    assert Counter(list(data.a) + list(data.b)) == before


@pytest.mark.parametrize(
    "source,target,ops",
    [
        (Loc.TOP_A, Loc.TOP_B, [Op.PB]),
        (Loc.TOP_A, Loc.BOTTOM_B, [Op.PB, Op.RB]),
        (Loc.BOTTOM_A, Loc.BOTTOM_B, [Op.RRA, Op.PB, Op.RB]),
        (Loc.BOTTOM_B, Loc.BOTTOM_A, [Op.RRB, Op.PA, Op.RA]),
        (Loc.TOP_B, Loc.BOTTOM_B, [Op.RB]),
    ],
)
def test_move_records_operations(source, target, ops):
    data = make([1, 2, 3], [4, 5, 6])
    move_from_to(data, source, target)
    assert data.ops == ops


def test_move_to_same_location_does_nothing():
    data = make([1, 2, 3], [4, 5, 6])
    move_from_to(data, Loc.TOP_A, Loc.TOP_A)
    assert data.ops == []
    assert list(data.a) == [1, 2, 3]


def test_chunk_to_the_top_when_chunk_fills_stack():
    data = make([1, 2, 3], [4, 5])
    chunk_b = Chunk(Loc.BOTTOM_B, 2)
    chunk_to_the_top(data, chunk_b)
    assert chunk_b.loc is Loc.TOP_B
    chunk_a = Chunk(Loc.BOTTOM_A, 3)
    chunk_to_the_top(data, chunk_a)
    assert chunk_a.loc is Loc.TOP_A


def test_chunk_to_the_top_leaves_partial_chunk():
    data = make([1, 2, 3], [4, 5])
    chunk = Chunk(Loc.BOTTOM_A, 2)
    chunk_to_the_top(data, chunk)
    assert chunk == Chunk(Loc.BOTTOM_A, 2)


def test_split_dest_holds_chunks():
    dest = SplitDest(Chunk(Loc.BOTTOM_B, 0), Chunk(Loc.TOP_B, 0), Chunk(Loc.BOTTOM_A, 0))
    dest.max.size += 1
    assert dest.max.size == 1
    assert dest.min.loc is Loc.BOTTOM_B