"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def split_arguments(args: Sequence[str]) -> list[str]:
    """Return the value words held by ``args``.

    A single argument is split on spaces, so ``"3 1 2"`` holds three
    values; several arguments are taken one value each, unchanged.
    """
    if len(args) == 1:
        return [word for word in args[0].split(" ") if word]
    return list(args)


def parse_int(text: str) -> int:
    """Parse one value: an optional sign followed by decimal digits.

    The result must fit a signed 32-bit integer; anything else raises
    InputError.
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not set(digits) <= _DIGITS:
        raise InputError(f"not an integer: {text!r}")
    value = -int(digits) if text.startswith("-") else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_values(args: Sequence[str]) -> list[int]:
    """Parse every value in ``args``, rejecting bad words and duplicates."""
    values = [parse_int(word) for word in split_arguments(args)]
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values