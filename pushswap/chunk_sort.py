"""Recursive three-way chunk sort of stack a."""

from __future__ import annotations

from pushswap.chunk import (
    Chunk,
    Loc,
    SplitDest,
    chunk_max_value,
    chunk_to_the_top,
    chunk_value,
    move_from_to,
)
from pushswap.small import (
    a_partly_sort,
    easy_sort,
    sort_one,
    sort_three,
    sort_two,
    split_max_reduction,
)
from pushswap.stack import PushSwap

_SPLIT_LOCS: dict[Loc, tuple[Loc, Loc, Loc]] = {
    Loc.TOP_A: (Loc.BOTTOM_B, Loc.TOP_B, Loc.BOTTOM_A),
    Loc.BOTTOM_A: (Loc.BOTTOM_B, Loc.TOP_B, Loc.TOP_A),
    Loc.TOP_B: (Loc.BOTTOM_B, Loc.BOTTOM_A, Loc.TOP_A),
    Loc.BOTTOM_B: (Loc.TOP_B, Loc.BOTTOM_A, Loc.TOP_A),
}


def split_locations(loc: Loc) -> SplitDest:
    """Return empty min, mid and max chunks placed where a split of ``loc`` sends them."""
    min_loc, mid_loc, max_loc = _SPLIT_LOCS[loc]
    return SplitDest(Chunk(min_loc, 0), Chunk(mid_loc, 0), Chunk(max_loc, 0))


def third_pivots(loc: Loc, size: int) -> tuple[int, int]:
    """Return the two pivot offsets, below the chunk maximum, for splitting ``size`` values."""
    pivot_2 = size // 3
    if loc.on_a:
        pivot_1 = size if size < 15 else 2 * size // 3
    else:
        pivot_1 = size // 2
    if loc is Loc.BOTTOM_B and size < 8:
        pivot_2 = size // 2
    return pivot_1, pivot_2


def chunk_split(data: PushSwap, chunk: Chunk) -> SplitDest:
    """Empty ``chunk`` into three chunks of small, middle and large values."""
    dest = split_locations(chunk.loc)
    pivot_1, pivot_2 = third_pivots(chunk.loc, chunk.size)
    max_value = chunk_max_value(data, chunk)
    while chunk.size > 0:
        chunk.size -= 1
        next_value = chunk_value(data, chunk, 1)
        if next_value > max_value - pivot_2:
            move_from_to(data, chunk.loc, dest.max.loc)
            dest.max.size += 1
            split_max_reduction(data, dest.max)
            if a_partly_sort(data, 1) and chunk.size:
                easy_sort(data, chunk)
        elif next_value > max_value - pivot_1:
            move_from_to(data, chunk.loc, dest.mid.loc)
            dest.mid.size += 1
        else:
            move_from_to(data, chunk.loc, dest.min.loc)
            dest.min.size += 1
    return dest


def rec_chunk_sort(data: PushSwap, chunk: Chunk) -> None:
    """Sort ``chunk`` onto the top of a, splitting it until its parts are small."""
    chunk_to_the_top(data, chunk)
    easy_sort(data, chunk)
    if chunk.size <= 3:
        if chunk.size == 3:
            sort_three(data, chunk)
        elif chunk.size == 2:
            sort_two(data, chunk)
        elif chunk.size == 1:
            sort_one(data, chunk)
        return
    dest = chunk_split(data, chunk)
    rec_chunk_sort(data, dest.max)
    rec_chunk_sort(data, dest.mid)
    rec_chunk_sort(data, dest.min)


def chunk_sort(data: PushSwap) -> None:
    """Sort the whole of stack a."""
    rec_chunk_sort(data, Chunk(Loc.TOP_A, data.size))