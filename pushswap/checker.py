"""Checking that a list of operations read from input sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from pushswap.stack import Op, PushSwap, PushSwapError, parse_op

_MAX_OP_LENGTH = 3


def read_ops(stream: TextIO) -> list[Op]:
    """Read one operation per newline-terminated line until the end of ``stream``."""
    text = stream.read()
    if not text:
        return []
    *lines, rest = text.split("\n")
    if rest:
        raise PushSwapError("operation not terminated by a newline")
    ops = []
    for line in lines:
        if not line or len(line) > _MAX_OP_LENGTH:
            raise PushSwapError(f"malformed line: {line!r}")
        ops.append(parse_op(line))
    return ops


def _run(data: PushSwap, ops: Iterable[Op | str]) -> bool:
    for op in ops:
        data.apply(op if isinstance(op, Op) else parse_op(op))
    return data.a.is_full() and data.is_sorted()


def check(args: Sequence[str], ops: Iterable[Op | str]) -> bool:
    """Tell whether ``ops`` sort the numbers given as ``args`` and leave b empty."""
    data = PushSwap.from_arguments(args, recording=False)
    return _run(data, ops)


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        data = PushSwap.from_arguments(args, recording=False)
        if data.size == 0:
            return 0
        ops = read_ops(sys.stdin)
        sorted_ok = _run(data, ops)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())