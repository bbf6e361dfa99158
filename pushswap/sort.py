"""Choosing a sort for stack a and the command that prints its operations."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.chunk_sort import chunk_sort
from pushswap.optimize import optimize
from pushswap.stack import Op, PushSwap, PushSwapError, format_ops


def sort_three_a(data: PushSwap) -> None:
    """Sort a stack a that holds exactly three values."""
    first, second, third = data.a.value(1), data.a.value(2), data.a.value(3)
    if first > second and third > second and third > first:
        data.sa()
    elif first > second and third > second and first > third:
        data.ra()
    elif second > first and second > third and first > third:
        data.rra()
    elif second > first and second > third and third > first:
        data.sa()
        data.ra()
    elif first > second and second > third and first > third:
        data.sa()
        data.rra()


def sort_five_a(data: PushSwap) -> None:
    """Sort a stack a that holds exactly five ranks."""
    while len(data.a) > 3:
        if data.a.value(1) in (1, 2):
            data.pb()
        else:
            data.ra()
    if data.b.value(1) < data.b.value(2):
        data.sb()
    sort_three_a(data)
    data.pa()
    data.pa()


def sort(data: PushSwap) -> None:
    """Sort stack a, leaving a shortened record of the operations used."""
    if data.size <= 1 or data.is_sorted():
        return
    if data.size == 3:
        sort_three_a(data)
    elif data.size == 5:
        sort_five_a(data)
    else:
        chunk_sort(data)
    data.ops = optimize(data.ops)


def solve(args: Sequence[str]) -> list[Op]:
    """Return the operations that sort the numbers given as ``args``."""
    data = PushSwap.from_arguments(args)
    sort(data)
    return data.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ops = solve(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(format_ops(ops))
    return 0


if __name__ == "__main__":
    sys.exit(main())