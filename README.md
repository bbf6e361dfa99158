# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations. `push_swap` prints the operations that leave
stack `a` in ascending order from top to bottom. `checker` verifies that
a given list of operations really sorts the input.

## Operations

| Op    | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the two top elements of `a`                    |
| `sb`  | swap the two top elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

A swap with fewer than two elements and a push from an empty stack do
nothing.

## Installation

```
pip install .
```

## Command line

Each argument is one integer in the range of a signed 32-bit int,
optionally preceded by `+` or `-`. The first argument is the top of the
stack.

```
$ push_swap 2 1 3
sa
```

Pipe the result into the checker, which takes the same numbers:

```
$ push_swap 3 5 1 4 2 | checker 3 5 1 4 2
OK
```

`checker` reads one operation per line from standard input; every line,
the last included, must end with a newline. It prints `OK` if stack `a`
ends sorted and `b` ends empty, and `KO` otherwise. Both commands print
`Error` to standard error and exit with status 1 when:

- an argument is not an integer;
- an argument is out of range;
- an argument appears twice;
- (checker only) an operation line is empty, unknown or not terminated
  by a newline.

When no numbers are given, neither command prints anything, and
`checker` does not read its input.

The same commands are available as `python -m pushswap.sort` and
`python -m pushswap.checker`.

## Library use

```python
from pushswap.sort import solve
from pushswap.checker import check

ops = solve(["3", "5", "1", "4", "2"])
assert check(["3", "5", "1", "4", "2"], ops)
```

- `pushswap.sort.solve(args)` returns a list of `pushswap.stack.Op`
  members; `pushswap.stack.format_ops(ops)` renders them one per line.
- `pushswap.checker.check(args, ops)` accepts `Op` members or their
  names as strings.
- `pushswap.checker.read_ops(stream)` reads operations from a text
  stream.
- `pushswap.stack.PushSwap` holds both stacks and exposes each operation
  as a method (`pa()`, `rra()`, …), as well as `apply(op)` and
  `is_sorted()`. Its `ops` attribute records the operations applied.
- `pushswap.optimize.optimize(ops)` drops operations that cancel out and
  merges `ra`/`rb`, `rra`/`rrb` and `sa`/`sb` pairs.

Invalid input raises `pushswap.stack.PushSwapError`.