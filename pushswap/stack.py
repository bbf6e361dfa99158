"""Two bounded stacks of ranks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Iterator, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = "0123456789"


class PushSwapError(Exception):
    """Raised for invalid input or an unknown operation."""


class Op(str, Enum):
    """An operation on the pair of stacks, valued by its written name."""

    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    SA = "sa"
    SB = "sb"
    SS = "ss"

    def __str__(self) -> str:
        return self.value


def parse_op(text: str) -> Op:
    """Return the operation written as ``text``."""
    try:
        return Op(text)
    except ValueError:
        raise PushSwapError(f"unknown operation: {text!r}") from None


def format_ops(ops: Iterable[Op]) -> str:
    """Render operations one per line, each line ending in a newline."""
    return "".join(f"{op.value}\n" for op in ops)


def valid_arg(arg: str) -> bool:
    """Tell whether ``arg`` is a signed decimal integer that fits in 32 bits."""
    if not arg:
        return False
    sign = 1
    digits = arg
    if digits[0] in "+-":
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
        if not digits:
            return False
    num = 0
    for ch in digits:
        if ch not in _DIGITS:
            return False
        num = num * 10 + _DIGITS.index(ch)
        if (sign == 1 and num > INT_MAX) or (sign == -1 and -num < INT_MIN):
            return False
    return True


def to_ranks(numbers: Sequence[int]) -> list[int]:
    """Replace each number by how many numbers are less than or equal to it."""
    return [sum(1 for other in numbers if other <= number) for number in numbers]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate command-line numbers and return their ranks, top first."""
    numbers = []
    for arg in args:
        if not valid_arg(arg):
            raise PushSwapError(f"invalid argument: {arg!r}")
        numbers.append(int(arg))
    if len(set(numbers)) != len(numbers):
        raise PushSwapError("duplicate argument")
    return to_ranks(numbers)


class Stack:
    """A stack of positive values with a fixed capacity.

    Reading past the last value gives 0, as empty slots hold 0, and reads
    wrap around after ``capacity`` positions.
    """

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        self.capacity = capacity
        self._items: deque[int] = deque(values)
        if len(self._items) > capacity:
            raise ValueError("more values than capacity")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.capacity}, {list(self._items)})"

    def _slot(self, steps: int) -> int | None:
        if self.capacity <= 0:
            return None
        steps = max(steps, 0) % self.capacity
        return steps if steps < len(self._items) else None

    def value(self, n: int) -> int:
        """Return the n-th value from the top (1 is the top), 0 if the slot is empty."""
        slot = self._slot(n - 1)
        return 0 if slot is None else self._items[slot]

    def bottom_value(self, n: int) -> int:
        """Return the n-th value from the bottom (1 is the bottom), 0 if the slot is empty."""
        slot = self._slot(n - 1)
        return 0 if slot is None else self._items[len(self._items) - 1 - slot]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push_top(self, item: int) -> None:
        if self.is_full():
            raise IndexError("push onto a full stack")
        self._items.appendleft(item)

    def pop_top(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self._items.rotate(1)

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) >= 2:
            self._items[0], self._items[1] = self._items[1], self._items[0]


class PushSwap:
    """Stacks a and b, with a record of the operations applied to them."""

    def __init__(self, ranks: Sequence[int], recording: bool = True) -> None:
        size = len(ranks)
        self.a = Stack(size, ranks)
        self.b = Stack(size)
        self.recording = recording
        self.ops: list[Op] = []

    @classmethod
    def from_arguments(cls, args: Sequence[str], recording: bool = True) -> PushSwap:
        return cls(parse_arguments(args), recording)

    @property
    def size(self) -> int:
        return self.a.capacity

    def _record(self, op: Op) -> None:
        if self.recording:
            self.ops.append(op)

    @staticmethod
    def _push(src: Stack, dest: Stack) -> None:
        if dest.is_full() or not src:
            return
        dest.push_top(src.pop_top())

    def pa(self) -> None:
        self._push(self.b, self.a)
        self._record(Op.PA)

    def pb(self) -> None:
        self._push(self.a, self.b)
        self._record(Op.PB)

    def ra(self) -> None:
        self.a.rotate()
        self._record(Op.RA)

    def rb(self) -> None:
        self.b.rotate()
        self._record(Op.RB)

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._record(Op.RR)

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._record(Op.RRA)

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._record(Op.RRB)

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._record(Op.RRR)

    def sa(self) -> None:
        self.a.swap()
        self._record(Op.SA)

    def sb(self) -> None:
        self.b.swap()
        self._record(Op.SB)

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._record(Op.SS)

    def apply(self, op: Op) -> None:
        """Apply one operation given as an ``Op``."""
        if not isinstance(op, Op):
            raise PushSwapError(f"unknown operation: {op!r}")
        getattr(self, op.value)()

    def is_sorted(self) -> bool:
        """Tell whether a holds every rank in increasing order from the top."""
        return list(self.a) == list(range(1, self.size + 1))