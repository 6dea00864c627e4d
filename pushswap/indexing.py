"""Ranking the input values and building the initial stack ``a``."""

from __future__ import annotations

from typing import Sequence

from pushswap.stacks import Node, Stacks
from pushswap.validation import parse_values


def _first_positions(items: Sequence[int]) -> dict[int, int]:
    positions: dict[int, int] = {}
    for position, item in enumerate(items):
        positions.setdefault(item, position)
    return positions


def rank(values: Sequence[int]) -> list[int]:
    """Return, for each value, its position among the values sorted ascending."""
    positions = _first_positions(sorted(values))
    return [positions[value] for value in values]


def find_next_direction(
    values: Sequence[int], sorted_values: Sequence[int], position: int, index: int
) -> int:
    """Tell where the next larger value lies in the input.

    ``position`` is where the current value sits in ``values`` and ``index``
    is its rank in ``sorted_values``.  The result is 1 when the next larger
    value comes later in the input, -1 when it comes earlier, and 0 when
    there is no larger value.
    """
    if index + 1 >= len(values):
        return 0
    try:
        next_position = list(values).index(sorted_values[index + 1])
    except ValueError:
        return 0
    return 1 if next_position > position else -1


def build_nodes(values: Sequence[int]) -> list[Node]:
    """Make one node per value, carrying its rank and next direction."""
    sorted_values = sorted(values)
    return [
        Node(
            value=value,
            index=index,
            next_direction=find_next_direction(values, sorted_values, position, index),
        )
        for position, (value, index) in enumerate(zip(values, rank(values)))
    ]


def parse_stacks(args: Sequence[str]) -> Stacks:
    """Parse command-line arguments into stacks with every value on ``a``.

    Raises InputError for a bad value or a duplicate.
    """
    return Stacks(build_nodes(parse_values(args)))