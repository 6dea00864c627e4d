"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.indexing import parse_stacks
from pushswap.sorting import sort_stacks
from pushswap.validation import InputError


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the integers held by ``args``.

    Raises InputError when the arguments are not a valid set of integers.
    """
    return sort_stacks(parse_stacks(args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("Error\n")
        return 1
    try:
        operations = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())