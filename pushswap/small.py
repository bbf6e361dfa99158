"""Sorting chunks of up to three values and the shortcuts that finish values early."""

from __future__ import annotations

from pushswap.chunk import Chunk, Loc, chunk_max_value, chunk_value, loc_to_stack, move_from_to
from pushswap.stack import PushSwap

_AWAY_FROM_TOP_A = (Loc.BOTTOM_A, Loc.BOTTOM_B, Loc.TOP_B)


def sort_one(data: PushSwap, chunk: Chunk) -> None:
    """Bring the single value of ``chunk`` to the top of a."""
    if chunk.loc in _AWAY_FROM_TOP_A:
        move_from_to(data, chunk.loc, Loc.TOP_A)
    chunk.size -= 1


def sort_two(data: PushSwap, chunk: Chunk) -> None:
    """Bring the two values of ``chunk`` to the top of a, in order."""
    if chunk.loc in _AWAY_FROM_TOP_A:
        move_from_to(data, chunk.loc, Loc.TOP_A)
        move_from_to(data, chunk.loc, Loc.TOP_A)
    if data.a.value(1) > data.a.value(2):
        data.sa()
    chunk.size -= 2


def _sort_three_top_a(data: PushSwap, chunk: Chunk, max_value: int) -> None:
    stack = data.a
    if stack.value(1) == max_value:
        data.sa()
        data.ra()
        data.sa()
        data.rra()
    elif stack.value(2) == max_value:
        data.ra()
        data.sa()
        data.rra()
    chunk.loc = Loc.TOP_A


def _sort_three_top_b(data: PushSwap, chunk: Chunk, max_value: int) -> None:
    stack = data.b
    data.pa()
    if stack.value(1) == max_value:
        data.pa()
        data.sa()
    elif stack.value(2) == max_value:
        data.sb()
        data.pa()
        data.sa()
    else:
        data.pa()
    data.pa()
    chunk.loc = Loc.TOP_A


def _sort_three_bottom_a(data: PushSwap, chunk: Chunk, max_value: int) -> None:
    stack = data.a
    data.rra()
    data.rra()
    if stack.value(1) == max_value:
        data.sa()
        data.rra()
    elif stack.value(2) == max_value:
        data.rra()
    else:
        data.pb()
        data.rra()
        data.sa()
        data.pa()
    chunk.loc = Loc.TOP_A


def _sort_three_bottom_b(data: PushSwap, chunk: Chunk, max_value: int) -> None:
    stack = data.b
    data.rrb()
    data.rrb()
    if stack.value(1) == max_value:
        data.pa()
        data.rrb()
    elif stack.value(2) == max_value:
        data.sb()
        data.pa()
        data.rrb()
    else:
        data.rrb()
        data.pa()
    chunk.loc = Loc.TOP_B


_SORT_THREE = {
    Loc.TOP_A: _sort_three_top_a,
    Loc.TOP_B: _sort_three_top_b,
    Loc.BOTTOM_A: _sort_three_bottom_a,
    Loc.BOTTOM_B: _sort_three_bottom_b,
}


def sort_three(data: PushSwap, chunk: Chunk) -> None:
    """Bring the three values of ``chunk`` to the top of a, in order."""
    max_value = chunk_max_value(data, chunk)
    _SORT_THREE[chunk.loc](data, chunk, max_value)
    chunk.size -= 1
    sort_two(data, chunk)


def _handle_top_b(data: PushSwap, chunk: Chunk) -> None:
    data.sb()
    data.pa()
    if data.b.value(1) == data.a.value(1) - 1:
        data.pa()
        chunk.size -= 1


def _handle_bottom_a(data: PushSwap, chunk: Chunk) -> None:
    data.rra()
    data.rra()
    data.sa()
    if data.a.value(1) == data.a.value(2) - 1:
        chunk.size -= 1
    else:
        data.ra()


def _handle_bottom_b(data: PushSwap, chunk: Chunk) -> None:
    data.rrb()
    data.rrb()
    data.pa()
    if data.b.value(1) == data.a.value(1) - 1:
        data.pa()
        chunk.size -= 1
    else:
        data.rb()


_SECOND_HANDLERS = {
    Loc.TOP_B: _handle_top_b,
    Loc.BOTTOM_A: _handle_bottom_a,
    Loc.BOTTOM_B: _handle_bottom_b,
}


def _easy_sort_second(data: PushSwap, chunk: Chunk) -> None:
    handler = _SECOND_HANDLERS.get(chunk.loc)
    if handler is not None:
        handler(data, chunk)
    chunk.size -= 1


def easy_sort(data: PushSwap, chunk: Chunk) -> None:
    """Move values of ``chunk`` onto a while they directly precede its top."""
    while chunk.loc is not Loc.TOP_A and chunk.size:
        top_a = data.a.value(1)
        if top_a == chunk_value(data, chunk, 1) + 1 and chunk.size > 0:
            sort_one(data, chunk)
        elif top_a == chunk_value(data, chunk, 2) + 1 and chunk.size > 1:
            _easy_sort_second(data, chunk)
        else:
            break


def a_partly_sort(data: PushSwap, start: int) -> bool:
    """Tell whether a, from its ``start``-th value on, climbs by one up to the largest rank."""
    a = data.a
    position = start
    while a.value(position) != data.size:
        current = a.value(position)
        position += 1
        if a.value(position) != current + 1:
            return False
    return True


def is_consecutive(a: int, b: int, c: int, d: int) -> bool:
    """Tell whether a, b and c in some order, followed by d, are consecutive."""
    low, mid, high = sorted((a, b, c))
    return mid - low == 1 and high - mid == 1 and d - high == 1


def split_max_reduction(data: PushSwap, chunk: Chunk) -> None:
    """Shrink a chunk on top of a whose values already sit in their final place."""
    a = data.a
    if (
        chunk.loc is Loc.TOP_A
        and chunk.size == 3
        and is_consecutive(a.value(1), a.value(2), a.value(3), a.value(4))
        and a_partly_sort(data, 4)
    ):
        sort_three(data, chunk)
        return
    if chunk.loc is Loc.TOP_A and a.value(1) == a.value(3) - 1 and a_partly_sort(data, 3):
        data.sa()
        chunk.size -= 1
    if chunk.loc is Loc.TOP_A and a_partly_sort(data, 1):
        chunk.size -= 1