"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


@dataclass(eq=False)
class Node:
    """One element of a stack.

    ``index`` is the element's rank among all values, ``next_direction``
    tells where the next larger value sat in the input as given, and the
    two costs are filled in by the sorting strategies.
    """

    value: int
    index: int = 0
    next_direction: int = 0
    cost_a: int = 0
    cost_b: int = 0


def _swap(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: Deque[Node]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: Deque[Node], target: Deque[Node]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every operation that takes effect is appended to ``operations``.  The
    combined operations (``ss``, ``rr``, ``rrr``) are always recorded, even
    when neither stack changed.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self.a: Deque[Node] = deque(nodes)
        self.b: Deque[Node] = deque()
        self.max_size = len(self.a)
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"

    @property
    def size_a(self) -> int:
        return len(self.a)

    @property
    def size_b(self) -> int:
        return len(self.b)

    def _record(self, name: str, done: bool) -> None:
        if done:
            self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._record("sa", _swap(self.a))

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._record("sb", _swap(self.b))

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        _swap(self.a)
        _swap(self.b)
        self._record("ss", True)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._record("pa", _push(self.b, self.a))

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._record("pb", _push(self.a, self.b))

    def ra(self) -> None:
        """Shift ``a`` up: the top element becomes the last."""
        self._record("ra", _rotate(self.a))

    def rb(self) -> None:
        """Shift ``b`` up: the top element becomes the last."""
        self._record("rb", _rotate(self.b))

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr", True)

    def rra(self) -> None:
        """Shift ``a`` down: the last element becomes the top."""
        self._record("rra", _reverse_rotate(self.a))

    def rrb(self) -> None:
        """Shift ``b`` down: the last element becomes the top."""
        self._record("rrb", _reverse_rotate(self.b))

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr", True)

    def apply(self, name: str) -> None:
        """Run the operation called ``name``; unknown names raise ValueError."""
        if name not in OPERATIONS:
            raise ValueError(f"unknown operation: {name!r}")
        operation: Callable[[], None] = getattr(self, name)
        operation()

    def is_sorted(self) -> bool:
        """True when the values of ``a`` do not decrease from top to bottom."""
        values = self.values_a()
        return all(first <= second for first, second in zip(values, values[1:]))

    def values_a(self) -> list[int]:
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        return [node.value for node in self.b]