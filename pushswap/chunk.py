"""Chunks: runs of values at one end of a stack, and moving values between ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pushswap.stack import PushSwap, Stack


class Loc(Enum):
    """One of the four ends a chunk can sit at."""

    TOP_A = "top_a"
    BOTTOM_A = "bottom_a"
    TOP_B = "top_b"
    BOTTOM_B = "bottom_b"

    @property
    def on_a(self) -> bool:
        return self in (Loc.TOP_A, Loc.BOTTOM_A)

    @property
    def at_top(self) -> bool:
        return self in (Loc.TOP_A, Loc.TOP_B)


@dataclass
class Chunk:
    """``size`` values held at the end ``loc``."""

    loc: Loc
    size: int


@dataclass
class SplitDest:
    """The three chunks a chunk is split into, by value range."""

    min: Chunk
    mid: Chunk
    max: Chunk


_MOVES: dict[tuple[Loc, Loc], tuple[str, ...]] = {
    (Loc.TOP_A, Loc.TOP_B): ("pb",),
    (Loc.TOP_A, Loc.BOTTOM_A): ("ra",),
    (Loc.TOP_A, Loc.BOTTOM_B): ("pb", "rb"),
    (Loc.TOP_B, Loc.TOP_A): ("pa",),
    (Loc.TOP_B, Loc.BOTTOM_B): ("rb",),
    (Loc.TOP_B, Loc.BOTTOM_A): ("pa", "ra"),
    (Loc.BOTTOM_A, Loc.TOP_A): ("rra",),
    (Loc.BOTTOM_A, Loc.TOP_B): ("rra", "pb"),
    (Loc.BOTTOM_A, Loc.BOTTOM_B): ("rra", "pb", "rb"),
    (Loc.BOTTOM_B, Loc.TOP_B): ("rrb",),
    (Loc.BOTTOM_B, Loc.TOP_A): ("rrb", "pa"),
    (Loc.BOTTOM_B, Loc.BOTTOM_A): ("rrb", "pa", "ra"),
}


def loc_to_stack(data: PushSwap, loc: Loc) -> Stack:
    """Return the stack that ``loc`` belongs to."""
    return data.a if loc.on_a else data.b


def chunk_value(data: PushSwap, chunk: Chunk, n: int) -> int:
    """Return the n-th value of ``chunk``, counted from its end (1 is the end)."""
    stack = loc_to_stack(data, chunk.loc)
    return stack.value(n) if chunk.loc.at_top else stack.bottom_value(n)


def chunk_max_value(data: PushSwap, chunk: Chunk) -> int:
    """Return the largest value in ``chunk``, or 0 for an empty chunk."""
    return max(
        (chunk_value(data, chunk, n) for n in range(1, chunk.size + 1)),
        default=0,
    ) if chunk.size > 0 else 0


def move_from_to(data: PushSwap, source: Loc, target: Loc) -> None:
    """Move one value from the end ``source`` to the end ``target``."""
    for name in _MOVES.get((source, target), ()):
        getattr(data, name)()


def chunk_to_the_top(data: PushSwap, chunk: Chunk) -> None:
    """Treat a bottom chunk that fills its whole stack as a top chunk."""
    if chunk.loc is Loc.BOTTOM_B and len(data.b) == chunk.size:
        chunk.loc = Loc.TOP_B
    if chunk.loc is Loc.BOTTOM_A and len(data.a) == chunk.size:
        chunk.loc = Loc.TOP_A