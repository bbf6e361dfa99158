"""Shortening a recorded list of operations without changing its effect."""

from __future__ import annotations

from typing import Iterable

from pushswap.stack import Op

_NEUTRAL: dict[Op, Op] = {
    Op.PA: Op.PB,
    Op.PB: Op.PA,
    Op.RA: Op.RRA,
    Op.RB: Op.RRB,
    Op.RRA: Op.RA,
    Op.RRB: Op.RB,
    Op.SA: Op.SA,
    Op.SB: Op.SB,
    Op.RR: Op.RRR,
}

_BOTH = frozenset({Op.PA, Op.PB, Op.RR, Op.RRR})
_ONLY_A = frozenset({Op.RA, Op.RRA, Op.SA})
_ONLY_B = frozenset({Op.RB, Op.RRB, Op.SB})

_CHILDREN: dict[frozenset[Op], Op] = {
    frozenset({Op.RA, Op.RB}): Op.RR,
    frozenset({Op.RRA, Op.RRB}): Op.RRR,
    frozenset({Op.SA, Op.SB}): Op.SS,
}


def neutral_op(op: Op) -> Op | None:
    """Return the operation that undoes ``op``, if one is known."""
    return _NEUTRAL.get(op)


def on_same_stack(ref: Op, other: Op) -> bool:
    """Tell whether ``ref`` and ``other`` touch a stack in common."""
    if ref in _BOTH or other in _BOTH:
        return True
    if ref in _ONLY_A:
        return other in _ONLY_A
    if ref in _ONLY_B:
        return other in _ONLY_B
    return False


def child_op(first: Op, second: Op) -> Op | None:
    """Return the single operation doing both ``first`` and ``second``, if any."""
    if first == second:
        return None
    return _CHILDREN.get(frozenset({first, second}))


def eliminate_neutral_ops(ops: Iterable[Op]) -> list[Op]:
    """Drop pairs of operations that cancel out, the first operation always kept."""
    result = list(ops)
    i = 1
    while i + 1 < len(result):
        ref = result[i]
        neutral = neutral_op(ref)
        if neutral is not None:
            j = i + 1
            while (
                not on_same_stack(ref, result[j])
                and result[j] != neutral
                and j + 1 < len(result)
            ):
                j += 1
            if i > 0 and result[j] == neutral:
                del result[j]
                del result[i]
                i -= 1
                continue
        i += 1
    return result


def merge_ops(ops: Iterable[Op]) -> list[Op]:
    """Fuse adjacent a and b operations of the same kind into one."""
    result = list(ops)
    i = 0
    while i + 1 < len(result):
        child = child_op(result[i], result[i + 1])
        if child is not None:
            del result[i + 1]
            result[i] = child
        i += 1
    return result


def optimize(ops: Iterable[Op]) -> list[Op]:
    """Remove cancelling pairs, then merge what can be merged."""
    result = list(ops)
    if not result:
        return []
    return merge_ops(eliminate_neutral_ops(result))