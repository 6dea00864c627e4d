"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from pushswap.indexing import parse_stacks
from pushswap.stacks import OPERATIONS
from pushswap.validation import InputError


def _read_commands(stream: TextIO) -> Iterator[str]:
    """Yield operation names from lines that must each end with a newline."""
    for line in stream:
        if not line.endswith("\n"):
            raise InputError(f"unterminated command: {line!r}")
        yield line[:-1]


def check(args: Sequence[str], commands: Iterable[str]) -> bool:
    """Apply ``commands`` to the stacks built from ``args``.

    Returns True when ``a`` ends sorted and ``b`` empty.  Raises InputError
    for bad arguments or for a command that is not an operation.
    """
    stacks = parse_stacks(args)
    for command in commands:
        if command not in OPERATIONS:
            raise InputError(f"unknown operation: {command!r}")
        stacks.apply(command)
    return stacks.is_sorted() and stacks.size_b == 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("Error\n")
        return 1
    try:
        parse_stacks(args)
        sorted_ok = check(args, _read_commands(sys.stdin))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())