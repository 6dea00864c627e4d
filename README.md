# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. The package installs two commands:

- `push_swap` prints, one per line, a sequence of operations that sorts the
  given numbers.
- `checker` reads operations from standard input, one per line, applies them
  to the given numbers and prints `OK` when stack `a` ends up sorted with `b`
  empty, or `KO` otherwise.

## Installation

```
pip install .
```

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An operation on a stack with too few elements does nothing.

## Usage

Numbers may be given as separate arguments or as one space-separated argument:

```
push_swap 3 2 1
push_swap "3 2 1"
```

Pipe the output into the checker to verify it:

```
push_swap 4 67 3 87 23 | checker 4 67 3 87 23
```

Each value is an optional `+` or `-` followed by decimal digits, and must fit
a signed 32-bit integer. A bad value, a duplicate, or no arguments at all
prints `Error` on standard error and exits with status 1. The checker does the
same for an unknown operation and for a last line that does not end with a
newline.

`push_swap` chooses its strategy by the number of values: a direct solution
for three, parking the smallest values on `b` for four or five, pushing values
in order for fewer than fifty, chunked insertion up to five hundred, and a
binary radix sort beyond that. Numbers that are already sorted produce no
output.

## Library use

```python
from pushswap.cli import solve
from pushswap.checker import check

ops = solve(["3", "2", "1"])
assert check(["3", "2", "1"], ops)
```

- `pushswap.stacks.Stacks` holds the two stacks (as deques of `Node`) and
  exposes each operation as a method; `Stacks.apply(name)` runs one by name
  and every operation that takes effect is recorded in `Stacks.operations`.
  `pushswap.stacks.OPERATIONS` lists the valid names.
- `pushswap.validation.parse_values` turns arguments into integers and raises
  `pushswap.validation.InputError` on bad input.
- `pushswap.indexing.parse_stacks` builds a `Stacks` with every value on `a`,
  each node carrying its rank among the values.
- `pushswap.sorting.sort_stacks` sorts a `Stacks` in place and returns the
  operations used.

## Limitations

With exactly two numbers given in descending order, `push_swap` prints no
operations, so the checker answers `KO` for its output.

## Tests

```
pip install ".[test]"
pytest
```